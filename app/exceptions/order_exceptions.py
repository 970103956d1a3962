# app/exceptions/order_exceptions.py
class OrderException(Exception):
    """Base exception for order-related errors."""
    pass


class OrderNotFoundError(OrderException):
    """Raised when order is not found in database."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order with id {order_id} not found")


class InvalidOrderIdError(OrderException):
    """Raised when an order identity is not a valid UUID."""

    def __init__(self, message: str = "Invalid order ID format"):
        super().__init__(message)


class InvalidOrderRequestError(OrderException):
    """Raised when order data is missing required dishes or is malformed."""

    def __init__(self, message: str = "You must order at least one main dish and one side dish"):
        super().__init__(message)
