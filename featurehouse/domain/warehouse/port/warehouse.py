"""Port for the managed warehouse that hosts feature tables."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from featurehouse.domain.shared.port import Port
from featurehouse.domain.warehouse.model.table import DatasetRef, TableDefinition, TableRef


@runtime_checkable
class Warehouse(Port, Protocol):
    """Dataset and table operations needed to provision feature destinations.

    Implementations raise their client's own exceptions on failure; callers
    see them unchanged.
    """

    @property
    @abstractmethod
    def project(self) -> str:
        """Project the underlying client is configured for."""
        ...

    @abstractmethod
    def get_dataset(self, ref: DatasetRef) -> DatasetRef | None:
        """Look up a dataset. Returns None if it does not exist."""
        ...

    @abstractmethod
    def create_dataset(self, ref: DatasetRef) -> None: ...

    @abstractmethod
    def get_table(self, ref: TableRef) -> TableRef | None:
        """Look up a table. Returns None if it does not exist."""
        ...

    @abstractmethod
    def create_table(self, table: TableDefinition) -> None: ...

    @abstractmethod
    def update_table(self, table: TableDefinition) -> None:
        """Overwrite schema and partitioning of an existing table."""
        ...
