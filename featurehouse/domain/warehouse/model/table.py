"""Warehouse value objects: references, columns and table definitions."""

from enum import StrEnum
from typing import Literal

from featurehouse.domain.shared.model.value import ValueObject


class ColumnType(StrEnum):
    """Standard SQL column types the derived schemas use."""

    STRING = "STRING"
    INT64 = "INT64"
    FLOAT64 = "FLOAT64"
    BOOL = "BOOL"
    BYTES = "BYTES"
    TIMESTAMP = "TIMESTAMP"


class Column(ValueObject):
    """A single column of a destination table."""

    name: str
    type: ColumnType
    description: str = ""


class TimePartitioning(ValueObject):
    type: Literal["DAY"] = "DAY"
    field: str


class DatasetRef(ValueObject):
    project: str
    dataset_id: str

    def __str__(self) -> str:
        return f"{self.project}.{self.dataset_id}"


class TableRef(ValueObject):
    project: str
    dataset_id: str
    table_id: str

    @property
    def dataset(self) -> DatasetRef:
        return DatasetRef(project=self.project, dataset_id=self.dataset_id)

    def __str__(self) -> str:
        return f"{self.project}.{self.dataset_id}.{self.table_id}"


class TableDefinition(ValueObject):
    """Desired state of a destination table: where it lives, its columns, its partitioning."""

    ref: TableRef
    columns: list[Column]
    time_partitioning: TimePartitioning


EVENT_TIMESTAMP_COLUMN = "event_timestamp"

# Appended after the feature columns of every table, in this order.
RESERVED_COLUMNS: tuple[Column, ...] = (
    Column(name="id", type=ColumnType.STRING, description="Entity ID for the row"),
    Column(
        name=EVENT_TIMESTAMP_COLUMN,
        type=ColumnType.TIMESTAMP,
        description="Event time for the row",
    ),
    Column(
        name="created_timestamp",
        type=ColumnType.TIMESTAMP,
        description="Time the row was created",
    ),
    Column(name="job_id", type=ColumnType.STRING, description="Import job ID for the row"),
)

DAILY_EVENT_PARTITIONING = TimePartitioning(type="DAY", field=EVENT_TIMESTAMP_COLUMN)
