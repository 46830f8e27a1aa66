"""Exception hierarchy for gridcoord."""

import gridcoord


class GridCoordError(Exception):
    """Base class for all gridcoord exceptions.

    It automatically prepends the gridcoord version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.gridcoord_version = getattr(gridcoord, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        super().__init__(f"[gridcoord {self.gridcoord_version}] {message}")


class ConversionError(GridCoordError, ArithmeticError):
    """Raised when a distance intermediate has no floating point representation.

    Examples: an integer sum too large for a float, or a ``Decimal`` that would
    silently become infinite.
    """

    def __init__(self, value, reason: str | None = None):
        self.value = value
        message = f"Cannot convert {value!r} to float"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CapabilityError(GridCoordError, TypeError):
    """Raised when an offset is taken on components that cannot be stepped by one."""

    def __init__(self, operation: str, value):
        self.operation = operation
        self.value = value
        message = (
            f"{operation}() requires integral or steppable components, "
            f"got {value!r} of type {type(value).__name__}."
        )
        super().__init__(message)
