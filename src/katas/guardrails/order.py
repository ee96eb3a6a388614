"""
Order processing with guard clauses.

An Order runs an ordered list of checks against its OrderService.
The first failing check decides the outcome; the order is finalized
only when every check passes.
"""

import logging
from collections.abc import Callable

from katas.guardrails.service import OrderService
from katas.models.base import OrderMessage

logger = logging.getLogger(__name__)


class Order:
    """An order that validates itself before finalizing.

    Attributes:
        order_service: Capability provider for checks and finalization

    Usage:
        order = Order(order_service)
        message = order.process_order()
    """

    def __init__(self, order_service: OrderService) -> None:
        """Initialize the order.

        Args:
            order_service: Capability provider for this order

        Raises:
            ValueError: If order_service is None
        """
        if order_service is None:
            raise ValueError("OrderService cannot be null.")
        self._order_service = order_service

    @property
    def order_service(self) -> OrderService:
        """Get the order's capability provider."""
        return self._order_service

    def _guards(self) -> list[tuple[Callable[["Order"], bool], OrderMessage]]:
        """Checks in precedence order, each paired with its failure message."""
        service = self._order_service
        return [
            (service.is_payment_method_valid, OrderMessage.INVALID_PAYMENT),
            (service.are_items_in_stock, OrderMessage.OUT_OF_STOCK),
            (service.is_shipping_address_valid, OrderMessage.INVALID_SHIPPING_ADDRESS),
        ]

    def process_order(self) -> str:
        """Validate and finalize the order.

        Checks run in order (payment, stock, shipping) and stop at the
        first failure. finalize_order is called once, only when all
        checks pass.

        Returns:
            Message describing the first failed check, or success
        """
        for check, failure in self._guards():
            if not check(self):
                logger.info(f"Order rejected: {failure.value}")
                return failure.value

        self._order_service.finalize_order(self)
        logger.info("Order finalized")
        return OrderMessage.SUCCESS.value
