from featurehouse.domain.warehouse.util.di.provider import WarehouseProvider

__all__ = ["WarehouseProvider"]
