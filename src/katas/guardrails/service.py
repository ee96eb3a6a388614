"""
Order Service Interface.

Defines the capability provider an Order delegates its checks to.
Implementations live outside this package.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from katas.guardrails.order import Order


class OrderService(ABC):
    """Abstract capability provider for order processing.

    Every operation receives the order being processed as context.

    Subclasses must implement:
        - is_payment_method_valid
        - are_items_in_stock
        - is_shipping_address_valid
        - finalize_order
    """

    @abstractmethod
    def is_payment_method_valid(self, order: "Order") -> bool:
        """Check whether the order's payment method can be charged."""
        pass

    @abstractmethod
    def are_items_in_stock(self, order: "Order") -> bool:
        """Check whether every item in the order is available."""
        pass

    @abstractmethod
    def is_shipping_address_valid(self, order: "Order") -> bool:
        """Check whether the order can be shipped to its address."""
        pass

    @abstractmethod
    def finalize_order(self, order: "Order") -> None:
        """Finalize an order that passed every check."""
        pass
