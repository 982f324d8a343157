"""Interface for service order repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.service_order import ServiceOrder
from ...models.service_order import ServiceOrderPayload


class IServiceOrderRepository(ABC):
    """Contract for service order data access."""

    @abstractmethod
    async def get_all(self) -> list[ServiceOrder]:
        """Gets every service order."""
        pass

    @abstractmethod
    async def create(self, payload: ServiceOrderPayload) -> Optional[ServiceOrder]:
        """Creates a service order. None if the API confirms without returning the record."""
        pass

    @abstractmethod
    async def update(self, order_id: int, payload: ServiceOrderPayload) -> ServiceOrder:
        """Replaces a service order's days and departments."""
        pass

    @abstractmethod
    async def delete(self, order_id: int) -> None:
        """Deletes a service order."""
        pass
