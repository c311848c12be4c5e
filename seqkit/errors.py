from typing import Any


class InvalidArgument(ValueError):
    """raised when an operation receives an argument it cannot work with"""

    def __init__(self, argument: str, value: Any, message: str):
        super().__init__(message)
        self.argument = argument
        self.value = value
