from collections.abc import Iterable

from dishka import provide
from google.cloud import bigquery

from featurehouse.config import Config
from featurehouse.domain.warehouse.port.warehouse import Warehouse
from featurehouse.infrastructure.bigquery.warehouse import BigQueryWarehouse
from featurehouse.util.di.base import Provider
from featurehouse.util.di.scope import Scope


class BigQueryProvider(Provider):
    @provide(scope=Scope.APP)
    def get_client(self, config: Config) -> Iterable[bigquery.Client]:
        client = bigquery.Client(
            project=config.bigquery.project,
            location=config.bigquery.location,
        )
        yield client
        client.close()

    @provide(scope=Scope.APP)
    def get_warehouse(self, client: bigquery.Client, config: Config) -> Warehouse:
        return BigQueryWarehouse(client, location=config.bigquery.location)
