"""DI provider for the warehouse bounded context."""

from dishka import provide

from featurehouse.domain.warehouse.service.provisioner import WarehouseProvisioner
from featurehouse.domain.warehouse.service.storage import StorageProvisioner
from featurehouse.util.di.base import Provider
from featurehouse.util.di.scope import Scope


class WarehouseProvider(Provider):
    provisioner = provide(WarehouseProvisioner, scope=Scope.UOW)
    storage = provide(StorageProvisioner, scope=Scope.UOW)
