"""HTTP implementation of ServiceOrderRepository."""

from typing import Optional

from ..interfaces.service_order_repository import IServiceOrderRepository
from ...domain.service_order import OrderDepartment, ServiceOrder
from ...models.service_order import ServiceOrderPayload
from ...config import logger as log
from .connection import HTTPConnection, parse_collection


def _order_from_payload(order_id: int, payload: ServiceOrderPayload) -> ServiceOrder:
    """Local copy of an order when the API answers a write without a body."""
    return ServiceOrder(
        id=order_id,
        os_number=payload.os_number,
        service_days=list(payload.service_days),
        departments=[
            OrderDepartment(
                department_id=dept.department_id,
                execution_start=dept.execution_start,
                execution_end=dept.execution_end,
                collaborators=list(dept.collaborator_ids),
            )
            for dept in payload.departments
        ],
    )


class HTTPServiceOrderRepository(IServiceOrderRepository):
    """Service orders served by /service-orders."""

    def __init__(self, connection: HTTPConnection):
        self._conn = connection

    async def get_all(self) -> list[ServiceOrder]:
        """Gets every service order."""
        log.debug("repo.service_order", "get_all")
        data = await self._conn.get("service-orders/")
        results = [ServiceOrder.from_dict(item) for item in parse_collection(data)]
        log.debug("repo.service_order", "get_all result", count=len(results))
        return results

    async def create(self, payload: ServiceOrderPayload) -> Optional[ServiceOrder]:
        """Creates a service order."""
        log.info("repo.service_order", "create", os_number=payload.os_number, days=payload.service_days)
        data = await self._conn.post("service-orders/", payload.to_request())
        if not data:
            log.warn("repo.service_order", "create answered without a body", os_number=payload.os_number)
            return None
        return ServiceOrder.from_dict(data)

    async def update(self, order_id: int, payload: ServiceOrderPayload) -> ServiceOrder:
        """Replaces a service order's days and departments."""
        log.info(
            "repo.service_order",
            "update",
            order_id=order_id,
            days=payload.service_days,
            departments=len(payload.departments),
        )
        data = await self._conn.put(f"service-orders/{order_id}", payload.to_request())
        if not data:
            return _order_from_payload(order_id, payload)
        return ServiceOrder.from_dict(data)

    async def delete(self, order_id: int) -> None:
        """Deletes a service order."""
        log.info("repo.service_order", "delete", order_id=order_id)
        await self._conn.delete(f"service-orders/{order_id}")
