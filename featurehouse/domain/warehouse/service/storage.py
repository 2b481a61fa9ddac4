"""Provision warehouse storage for every entity of an import job."""

import logging

from featurehouse.domain.shared.error import ConfigurationError, ValidationError
from featurehouse.domain.shared.service import Service
from featurehouse.domain.spec.model.spec import ImportSpecs
from featurehouse.domain.warehouse.model.options import BigQueryStorageOptions
from featurehouse.domain.warehouse.model.table import TableDefinition
from featurehouse.domain.warehouse.service.provisioner import (
    WarehouseProvisioner,
    build_table_definition,
    check_entity_consistency,
)
from featurehouse.domain.warehouse.service.schema import derive_columns

logger = logging.getLogger(__name__)

BIGQUERY_STORAGE_TYPE = "bigquery"


def check_storage_type(specs: ImportSpecs) -> None:
    if specs.warehouse.type.lower() != BIGQUERY_STORAGE_TYPE:
        raise ConfigurationError(
            f"Unsupported warehouse storage type: {specs.warehouse.type!r}"
        )


def check_declared_entities(specs: ImportSpecs) -> None:
    declared: set[str] = set()
    for entity in specs.entities:
        if entity.name in declared:
            raise ValidationError(f"Entity {entity.name!r} is declared twice", field="entity")
        declared.add(entity.name)

    for feature in specs.features:
        if feature.entity not in declared:
            raise ValidationError(
                f"Feature {feature.name!r} references undeclared entity {feature.entity!r}",
                field="entity",
            )


def plan_tables(specs: ImportSpecs, default_project: str | None = None) -> list[TableDefinition]:
    """Table definitions setup_storage would apply, computed without warehouse access.

    Args:
        specs: The import job's specs.
        default_project: Project to use when the storage spec sets no projectId.

    Raises:
        ConfigurationError: If the storage type is unsupported, datasetId is
            missing, or no project can be determined.
        ValidationError: If the feature specs are inconsistent.
    """
    check_storage_type(specs)
    check_declared_entities(specs)
    options = BigQueryStorageOptions.from_storage_spec(specs.warehouse)

    project = options.project_id or default_project
    if not project:
        raise ConfigurationError(
            "No project to plan against: set the projectId storage option "
            "or configure a default BigQuery project"
        )

    tables = []
    for entity in specs.entities:
        features = specs.features_for(entity.name)
        check_entity_consistency(entity, features)
        tables.append(build_table_definition(project, options, entity, derive_columns(features)))
    return tables


class StorageProvisioner(Service):
    """Dispatches an import job's warehouse storage spec to its provisioner."""

    provisioner: WarehouseProvisioner

    def setup_storage(self, specs: ImportSpecs) -> None:
        check_storage_type(specs)
        check_declared_entities(specs)
        # Fail on bad specs before provisioning the first entity
        BigQueryStorageOptions.from_storage_spec(specs.warehouse)
        for entity in specs.entities:
            derive_columns(specs.features_for(entity.name))

        for entity in specs.entities:
            features = specs.features_for(entity.name)
            logger.debug("Provisioning entity %s with %d features", entity.name, len(features))
            self.provisioner.setup(specs.warehouse, entity, features)
