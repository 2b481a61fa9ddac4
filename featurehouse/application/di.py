from dishka import Container, from_context, make_container

from featurehouse.config import Config
from featurehouse.domain.warehouse.util.di import WarehouseProvider
from featurehouse.infrastructure.bigquery import BigQueryProvider
from featurehouse.util.di.base import Provider
from featurehouse.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> Container:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_container(
        ConfigProvider(),
        BigQueryProvider(),
        WarehouseProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
