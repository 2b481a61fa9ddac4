"""Provision the dataset and table a feature import writes into."""

import logging
from collections.abc import Iterable

from featurehouse.domain.shared.error import ValidationError
from featurehouse.domain.shared.service import Service
from featurehouse.domain.spec.model.spec import EntitySpec, FeatureSpec, StorageSpec
from featurehouse.domain.warehouse.model.options import BigQueryStorageOptions
from featurehouse.domain.warehouse.model.table import (
    DAILY_EVENT_PARTITIONING,
    Column,
    DatasetRef,
    TableDefinition,
    TableRef,
)
from featurehouse.domain.warehouse.port.warehouse import Warehouse
from featurehouse.domain.warehouse.service.schema import derive_columns

logger = logging.getLogger(__name__)


def check_entity_consistency(entity: EntitySpec, features: Iterable[FeatureSpec]) -> None:
    """Every feature must belong to the entity being provisioned."""
    for feature in features:
        if feature.entity != entity.name:
            raise ValidationError(
                f"Feature {feature.name!r} belongs to entity {feature.entity!r}, "
                f"expected {entity.name!r}",
                field="entity",
            )


def build_table_definition(
    project: str,
    options: BigQueryStorageOptions,
    entity: EntitySpec,
    columns: list[Column],
) -> TableDefinition:
    return TableDefinition(
        ref=TableRef(project=project, dataset_id=options.dataset_id, table_id=entity.name),
        columns=columns,
        time_partitioning=DAILY_EVENT_PARTITIONING,
    )


class WarehouseProvisioner(Service):
    """Ensures a feature destination exists and matches the derived schema.

    Datasets are created when missing and otherwise left alone. Tables are
    created when missing and otherwise always updated to the derived schema.
    Warehouse errors are not caught here.
    """

    warehouse: Warehouse

    def setup(
        self,
        storage: StorageSpec,
        entity: EntitySpec,
        features: Iterable[FeatureSpec],
    ) -> None:
        features = list(features)

        # Validate everything before the first warehouse call
        options = BigQueryStorageOptions.from_storage_spec(storage)
        check_entity_consistency(entity, features)
        columns = derive_columns(features)

        project = options.resolve_project(self.warehouse.project)
        dataset = DatasetRef(project=project, dataset_id=options.dataset_id)
        self._ensure_dataset(dataset)

        table = build_table_definition(project, options, entity, columns)
        self._reconcile_table(table)

    def _ensure_dataset(self, ref: DatasetRef) -> None:
        if self.warehouse.get_dataset(ref) is not None:
            logger.debug("Dataset exists, skipping: %s", ref)
            return
        logger.info("Creating dataset: %s", ref)
        self.warehouse.create_dataset(ref)

    def _reconcile_table(self, table: TableDefinition) -> None:
        if self.warehouse.get_table(table.ref) is None:
            logger.info("Creating table: %s (%d columns)", table.ref, len(table.columns))
            self.warehouse.create_table(table)
        else:
            logger.info("Updating table: %s (%d columns)", table.ref, len(table.columns))
            self.warehouse.update_table(table)
