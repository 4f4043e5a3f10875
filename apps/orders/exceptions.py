"""
Errors raised by the order processor.

The message of each error is safe to show to the kiosk user; the API returns
it as ``{"detail": message}`` with status 400.
"""


class OrderError(Exception):
    """Base class for order placement failures."""

    default_message = "The order could not be placed."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidOrderRequest(OrderError):
    """The order request is empty, malformed or names an unknown store."""

    default_message = "Invalid order request."


class ProductNotFound(OrderError):
    """A line item references a product that does not exist in the store."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found.")


class InsufficientStock(OrderError):
    """A product does not have enough stock for the requested quantity."""

    def __init__(self, product_name, available, requested):
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for {product_name}. "
            f"Available: {available}, Requested: {requested}"
        )
