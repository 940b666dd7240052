"""Backend errors, semantic error categories, and dialect-layer failures."""

from __future__ import annotations

from enum import StrEnum


class BackendError(Exception):
    """A native error raised by the database driver.

    Only ``error_code`` is consulted during classification; the message is
    carried for diagnostics.
    """

    def __init__(self, message: str, error_code: int, sql_state: str | None = None) -> None:
        self.error_code = error_code
        self.sql_state = sql_state
        super().__init__(message)


# -- semantic categories -----------------------------------------------------


class AnalysisError(Exception):
    """Base for backend-agnostic error categories the engine branches on."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)
        self.__cause__ = cause


class TableAlreadyExistsError(AnalysisError):
    """Raised when creating a table or view that already exists."""


class ObjectKind(StrEnum):
    TABLE = "table"
    NAMESPACE = "namespace"


class NoSuchObjectError(AnalysisError):
    """Raised when a referenced database object does not exist."""

    kind: ObjectKind


class NoSuchTableError(NoSuchObjectError):
    kind = ObjectKind.TABLE


class NoSuchNamespaceError(NoSuchObjectError):
    kind = ObjectKind.NAMESPACE


class UnclassifiedError(AnalysisError):
    """Fallback category for backend errors with no specific meaning."""


# -- dialect layer -----------------------------------------------------------


class DialectError(Exception):
    """Base exception for failures inside the dialect layer."""


class UnsupportedFunctionError(DialectError):
    """Raised when a dialect refuses to render a scalar function."""

    def __init__(self, dialect_name: str, function_name: str, rendered: str | None = None) -> None:
        self.dialect_name = dialect_name
        self.function_name = function_name
        self.rendered = rendered
        detail = f": {rendered}" if rendered else ""
        super().__init__(
            f"Function '{function_name}' is not supported by dialect '{dialect_name}'{detail}"
        )


class AggregateArityError(DialectError):
    """Raised when an aggregate is requested with the wrong number of arguments.

    This is a caller defect, not a translation decline, and is never
    downgraded to "no SQL".
    """

    def __init__(self, function_name: str, expected: int, actual: int) -> None:
        self.function_name = function_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Aggregate {function_name} takes {expected} argument(s), got {actual}"
        )
