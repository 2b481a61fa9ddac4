"""BigQuery implementation of the Warehouse port."""

from google.api_core.exceptions import NotFound
from google.cloud import bigquery

from featurehouse.domain.warehouse.model.table import (
    Column,
    DatasetRef,
    TableDefinition,
    TableRef,
)
from featurehouse.domain.warehouse.port.warehouse import Warehouse

# Fields sent on update; everything else on the remote table is left as-is.
UPDATE_FIELDS = ["schema", "time_partitioning"]

_PARTITION_TYPES = {"DAY": bigquery.TimePartitioningType.DAY}


def to_dataset_reference(ref: DatasetRef) -> bigquery.DatasetReference:
    return bigquery.DatasetReference(ref.project, ref.dataset_id)


def to_table_reference(ref: TableRef) -> bigquery.TableReference:
    return bigquery.TableReference(to_dataset_reference(ref.dataset), ref.table_id)


def to_schema_field(column: Column) -> bigquery.SchemaField:
    return bigquery.SchemaField(
        column.name,
        column.type.value,
        mode="NULLABLE",
        description=column.description,
    )


def to_bigquery_table(table: TableDefinition) -> bigquery.Table:
    """Convert a TableDefinition to a bigquery.Table ready for create/update."""
    bq_table = bigquery.Table(
        to_table_reference(table.ref),
        schema=[to_schema_field(c) for c in table.columns],
    )
    bq_table.time_partitioning = bigquery.TimePartitioning(
        type_=_PARTITION_TYPES[table.time_partitioning.type],
        field=table.time_partitioning.field,
    )
    return bq_table


class BigQueryWarehouse(Warehouse):
    """Warehouse backed by a google-cloud-bigquery client.

    The client is owned by the caller. Only ``NotFound`` on lookups is
    translated (to None); every other client exception propagates.
    """

    def __init__(self, client: bigquery.Client, location: str | None = None) -> None:
        self._client = client
        self._location = location

    @property
    def project(self) -> str:
        return self._client.project

    def get_dataset(self, ref: DatasetRef) -> DatasetRef | None:
        try:
            self._client.get_dataset(to_dataset_reference(ref))
        except NotFound:
            return None
        return ref

    def create_dataset(self, ref: DatasetRef) -> None:
        dataset = bigquery.Dataset(to_dataset_reference(ref))
        if self._location:
            dataset.location = self._location
        self._client.create_dataset(dataset)

    def get_table(self, ref: TableRef) -> TableRef | None:
        try:
            self._client.get_table(to_table_reference(ref))
        except NotFound:
            return None
        return ref

    def create_table(self, table: TableDefinition) -> None:
        self._client.create_table(to_bigquery_table(table))

    def update_table(self, table: TableDefinition) -> None:
        self._client.update_table(to_bigquery_table(table), UPDATE_FIELDS)
