"""Typed view of the string options a BigQuery storage spec carries."""

from pydantic import Field

from featurehouse.domain.shared.error import ConfigurationError
from featurehouse.domain.shared.model.value import ValueObject
from featurehouse.domain.spec.model.spec import StorageSpec

DATASET_ID_OPTION = "datasetId"
PROJECT_ID_OPTION = "projectId"


class BigQueryStorageOptions(ValueObject):
    dataset_id: str = Field(min_length=1)
    project_id: str | None = None

    @classmethod
    def from_storage_spec(cls, spec: StorageSpec) -> "BigQueryStorageOptions":
        """Validate a storage spec's options once, at entry.

        Raises:
            ConfigurationError: If the datasetId option is missing or empty.
        """
        dataset_id = spec.options.get(DATASET_ID_OPTION)
        if not dataset_id:
            raise ConfigurationError(
                f"Storage spec {spec.id!r} is missing the {DATASET_ID_OPTION!r} option"
            )
        return cls(
            dataset_id=dataset_id,
            project_id=spec.options.get(PROJECT_ID_OPTION) or None,
        )

    def resolve_project(self, default_project: str) -> str:
        """The explicit projectId option wins over the client's ambient project."""
        return self.project_id or default_project
