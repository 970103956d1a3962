# app/exceptions/dish_exceptions.py
class DishException(Exception):
    """Base exception for dish-related errors."""
    pass


class DishNotFoundError(DishException):
    """Raised when a referenced dish is not in the catalog."""

    def __init__(self, message: str = "Dish not found"):
        super().__init__(message)


class DishCategoryMismatchError(DishException):
    """Raised when a dish is used in a slot that does not match its category."""

    def __init__(self, dish_name: str, expected: str, actual: str):
        self.dish_name = dish_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"Dish {dish_name} is a {actual} dish, expected {expected}")
