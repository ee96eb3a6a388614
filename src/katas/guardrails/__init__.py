"""
Guard Rails Kata.

Order processing expressed as a chain of guard clauses over an
injected OrderService.
"""

from katas.guardrails.order import Order
from katas.guardrails.service import OrderService

__all__ = [
    "Order",
    "OrderService",
]
