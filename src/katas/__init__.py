"""
Katas: Small refactoring exercises with tests.

Two isolated katas, each built around an injected collaborator:

- Guard rails: an Order that checks payment, stock and shipping through an
  OrderService before finalizing.
- Template method: a DataProcessor that validates, transforms and stores
  CSV/JSON payloads through a DataStorage.

Example:
    from katas.guardrails import Order

    order = Order(order_service)
    message = order.process_order()
"""

from katas.version import __version__

__all__ = [
    "__version__",
]
