"""The error kinds every driver and caller can rely on.

The generic layer only guarantees two failures exist consistently across all drivers: `OperationNotImplemented` when a
driver is missing a required operation, and `ParameterError` when batch parameters are inconsistent. Drivers should
translate their native failures (timeouts, constraint violations, lost connections) into `DatabaseError` or their own
subclasses of it, chaining the original with `raise ... from error`. Nothing here is retried or recovered.
"""
from typing import Any


class BaseDatabaseException(Exception):
    """Base exception for all dbinterface exceptions."""
    def __init__(self, *args, driver: Any | None = None):
        super().__init__(*args)

        self.driver = driver
        if driver:
            self.add_note(f" - Using Driver: {driver!r}")


class OperationNotImplemented(BaseDatabaseException, NotImplementedError):
    """Raised when a driver type does not provide an operation the contract requires.

    Attributes:
        operation: Name of the missing operation (e.g. `"prepare"`).
        target_type: The type the operation was invoked on, or the driver tag for `connect`.
    """
    def __init__(self, operation: str, target: Any, *, driver: Any | None = None):
        self.operation = operation
        self.target_type = target if isinstance(target, (type, str)) else type(target)
        super().__init__(f"`{operation}` not implemented for `{_describe(self.target_type)}`", driver=driver)


class ParameterError(BaseDatabaseException, ValueError):
    """Raised when parameters are used inconsistently, such as batch columns of differing lengths."""


class DatabaseError(BaseDatabaseException):
    """Fallback, generic error for failures reported by a database backend."""


class DriverConnectFailed(DatabaseError):
    """Raised when a driver fails to connect to a database."""


class DatabaseWarning(UserWarning):
    """Non-fatal advisory from a database operation.

    Drivers emit these with `warnings.warn`; they are never raised as failures.
    """


def _describe(target: type | str) -> str:
    if isinstance(target, str):
        return target

    return f"{target.__module__}.{target.__qualname__}"
