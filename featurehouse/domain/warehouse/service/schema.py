"""Map feature specs to warehouse columns."""

from collections.abc import Iterable

from featurehouse.domain.shared.error import ValidationError
from featurehouse.domain.spec.model.spec import FeatureSpec
from featurehouse.domain.spec.model.value_type import ValueType
from featurehouse.domain.warehouse.model.table import RESERVED_COLUMNS, Column, ColumnType

_TYPE_MAP: dict[ValueType, ColumnType] = {
    ValueType.BYTES: ColumnType.BYTES,
    ValueType.STRING: ColumnType.STRING,
    ValueType.INT32: ColumnType.INT64,
    ValueType.INT64: ColumnType.INT64,
    ValueType.DOUBLE: ColumnType.FLOAT64,
    ValueType.FLOAT: ColumnType.FLOAT64,
    ValueType.BOOL: ColumnType.BOOL,
    ValueType.TIMESTAMP: ColumnType.TIMESTAMP,
}

_RESERVED_NAMES = frozenset(c.name for c in RESERVED_COLUMNS)


def map_value_type(value_type: ValueType) -> ColumnType:
    """Convert a feature value type to its warehouse column type."""
    column_type = _TYPE_MAP.get(value_type)
    if column_type is None:
        raise ValidationError(f"Unsupported feature value type: {value_type}", field="value_type")
    return column_type


def map_feature(feature: FeatureSpec) -> Column:
    """Convert a FeatureSpec to a Column."""
    return Column(
        name=feature.name,
        type=map_value_type(feature.value_type),
        description=feature.description or "",
    )


def derive_columns(features: Iterable[FeatureSpec]) -> list[Column]:
    """Feature columns in input order, followed by the reserved columns."""
    columns: list[Column] = []
    seen: set[str] = set()
    for feature in features:
        if feature.name in _RESERVED_NAMES:
            raise ValidationError(
                f"Feature name {feature.name!r} collides with a reserved column",
                field="name",
            )
        if feature.name in seen:
            raise ValidationError(f"Duplicate feature name: {feature.name!r}", field="name")
        seen.add(feature.name)
        columns.append(map_feature(feature))

    columns.extend(RESERVED_COLUMNS)
    return columns
