"""Entity, feature and storage descriptors consumed by the provisioners."""

from pydantic import Field, field_validator

from featurehouse.domain.shared.model.value import ValueObject
from featurehouse.domain.spec.model.value_type import ValueType


class EntitySpec(ValueObject):
    """Logical subject that feature rows describe. Its name doubles as the table id."""

    name: str
    description: str = ""


class FeatureSpec(ValueObject):
    """One named, typed attribute of an entity."""

    name: str
    entity: str
    value_type: ValueType
    description: str = ""

    @field_validator("value_type", mode="before")
    @classmethod
    def _normalize_value_type(cls, v: object) -> object:
        # Spec files commonly spell types in lowercase (int64, string).
        if isinstance(v, str):
            return v.upper()
        return v


class StorageSpec(ValueObject):
    """Where and how to provision destination warehouse objects.

    ``options`` is the raw string mapping a storage spec carries; the
    warehouse-specific view is validated by the provisioner at entry.
    """

    id: str = ""
    type: str = "bigquery"
    options: dict[str, str] = Field(default_factory=dict)


class ImportSpecs(ValueObject):
    """Everything an import job needs to provision its warehouse destination."""

    entities: list[EntitySpec] = Field(default_factory=list)
    features: list[FeatureSpec] = Field(default_factory=list)
    warehouse: StorageSpec

    def features_for(self, entity_name: str) -> list[FeatureSpec]:
        """Features of one entity, in declaration order."""
        return [f for f in self.features if f.entity == entity_name]
