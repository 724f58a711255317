"""Exceptions for fieldtypes app."""

from typing import Any


class InvalidArgumentError(Exception):
    """Raised when a field value cannot be accepted as given."""

    def __init__(self, argument_name: str, message: str) -> None:
        """Initialize InvalidArgumentError.

        Args:
            argument_name: Name of the offending argument or attribute.
            message: Human readable reason.
        """
        self.argument_name = argument_name
        super().__init__(f"Argument '{argument_name}' is invalid: {message}")


class InvalidArgumentValueError(InvalidArgumentError, ValueError):
    """Raised when an argument has an acceptable type but a wrong value."""

    def __init__(
        self,
        argument_name: str,
        value: Any,
        where: str | None = None,
    ) -> None:
        """Initialize InvalidArgumentValueError.

        Args:
            argument_name: Name of the offending argument or attribute.
            value: The rejected value.
            where: Optional name of the class that rejected it.
        """
        self.value = value
        self.where = where

        location = f" in class '{where}'" if where else ''
        super().__init__(
            argument_name,
            f"'{value!r}' is wrong value{location}",
        )


class InvalidArgumentTypeError(InvalidArgumentError, TypeError):
    """Raised when an argument is not of the expected type."""

    def __init__(
        self,
        argument_name: str,
        expected_type: str,
        value: Any,
    ) -> None:
        """Initialize InvalidArgumentTypeError.

        Args:
            argument_name: Name of the offending argument or attribute.
            expected_type: Name of the type that was expected.
            value: The rejected value.
        """
        self.expected_type = expected_type
        self.value = value
        super().__init__(
            argument_name,
            f"expected value to be of type '{expected_type}', "
            f"received '{type(value).__name__}'",
        )


class UnknownFieldTypeError(LookupError):
    """Raised when no field type is registered under an identifier."""

    def __init__(self, identifier: str) -> None:
        """Initialize UnknownFieldTypeError.

        Args:
            identifier: The identifier that was looked up.
        """
        self.identifier = identifier
        super().__init__(f"Field type '{identifier}' is not registered")
