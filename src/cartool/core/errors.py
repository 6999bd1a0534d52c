"""
Structured error types for cartool.

Every failure cartool raises is a ``CarToolError``. The hierarchy separates
three audiences that must never be confused:

- **Callers** (agents, MCP clients): ``InvalidPropertyArgumentError`` and its
  two subclasses. Their messages carry stable literal substrings so a caller
  can branch on which one occurred.
- **Config authors**: ``ConfigError`` and ``RegistryConfigError``. Raised at
  registry build time with exact, deterministic messages.
- **Maintainers**: ``InternalInvariantError``. Means cartool's own tables or
  the registry are inconsistent. Adapters log the detail and hand the caller
  an opaque failure.

Manifesto:
    - **Typed hierarchy:** The class tells you who has to act
    - **Stable messages:** Caller-facing and config messages are contract
    - **Rich context:** Errors carry the property and area they concern
    - **Error chaining:** Original exceptions are kept as ``cause``

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                        CarToolError                           │
        │           (category, retryable, context, cause)               │
        ├──────────────────────────────────────────────────────────────┤
        │  ConfigError              InvalidPropertyArgumentError         │
        │  (CONFIG)                 (VALIDATION)                         │
        │     │                          │                               │
        │  RegistryConfigError      PropertyNotAuthorizedError (AUTH)    │
        │  ConfigFileNotFoundError  PropertyNotAvailableError (SOURCE)   │
        │                                                                │
        │  InternalInvariantError (INTERNAL)                             │
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> error = PropertyNotAuthorizedError("HVAC_FAN_SPEED")
    >>> "does not exist or is not authorized" in str(error)
    True
    >>> error.category.value
    'AUTH'

Tags:
    error-handling, exception-hierarchy, error-context, cartool

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and routing.

    Attributes:
        SOURCE: The vehicle property service reported a condition
        VALIDATION: A caller supplied an argument that cannot be served
        CONFIG: The property config or its artifact is invalid
        AUTH: The caller asked for a property outside the registry
        INTERNAL: cartool's own state is inconsistent (a bug)
    """

    SOURCE = "SOURCE"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    AUTH = "AUTH"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only non-None fields are serialized by ``to_dict()``; anything that has
    no dedicated field goes into ``metadata``.

    Attributes:
        property_name: Registry name of the property involved
        property_id: Numeric property id involved
        area_id: Area bitmask the request targeted
        area_type: Area type code of the descriptor
        config_file: Config file the error was found in
        metadata: Additional key-value pairs
    """

    property_name: str | None = None
    property_id: int | None = None
    area_id: int | None = None
    area_type: int | None = None
    config_file: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["property_name", "property_id", "area_id", "area_type", "config_file"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class CarToolError(Exception):
    """
    Base exception for all cartool errors.

    Subclasses set ``default_category`` and ``default_retryable`` so that
    raising sites only pass a message.

    Examples:
        >>> error = CarToolError("Decoder table missing", category=ErrorCategory.INTERNAL)
        >>> error.to_dict()["category"]
        'INTERNAL'

        Adding context fluently:

        >>> error = PropertyNotAvailableError("HVAC_AC_ON").with_context(area_id=49)
        >>> error.context.area_id
        49
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> CarToolError:
        """
        Add context to this error (fluent API).

        Usage:
            raise PropertyNotAvailableError(name).with_context(area_id=area_id)
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }

        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict

        if self.cause is not None:
            result["cause"] = str(self.cause)

        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS (build time)
# =============================================================================


class ConfigError(CarToolError):
    """
    Configuration error.

    Never retryable - the config must be fixed.
    """

    default_category = ErrorCategory.CONFIG
    default_retryable = False


class ConfigFileNotFoundError(ConfigError):
    """The property config file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Config file not found at: {path}")


class RegistryConfigError(ConfigError):
    """The property config violates a registry rule (names, ids, descriptions)."""

    pass


# =============================================================================
# CALLER-FACING ERRORS (runtime)
# =============================================================================


class InvalidPropertyArgumentError(CarToolError):
    """A property request names something the caller cannot use right now."""

    default_category = ErrorCategory.VALIDATION
    default_retryable = False

    def __init__(self, message: str, *, property_name: str, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.property_name = property_name
        self.context.property_name = property_name


class PropertyNotAuthorizedError(InvalidPropertyArgumentError):
    """The property name is not in the registry."""

    default_category = ErrorCategory.AUTH

    def __init__(self, property_name: str):
        super().__init__(
            f"Property '{property_name}' does not exist or is not authorized",
            property_name=property_name,
        )


class PropertyNotAvailableError(InvalidPropertyArgumentError):
    """The property is authorized but the service reports it unavailable."""

    default_category = ErrorCategory.SOURCE
    default_retryable = True

    def __init__(self, property_name: str):
        super().__init__(
            f"Property '{property_name}' is currently not available",
            property_name=property_name,
        )


# =============================================================================
# INTERNAL ERRORS
# =============================================================================


class InternalInvariantError(CarToolError):
    """
    cartool's own tables or registry are inconsistent.

    Never shown verbatim to a caller; adapters replace the message with an
    opaque failure after logging it.
    """

    default_category = ErrorCategory.INTERNAL
    default_retryable = False


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def is_caller_error(error: Exception) -> bool:
    """Check if an error may be reported verbatim to an external caller."""
    return isinstance(error, InvalidPropertyArgumentError)


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "CarToolError",
    "ConfigError",
    "ConfigFileNotFoundError",
    "RegistryConfigError",
    "InvalidPropertyArgumentError",
    "PropertyNotAuthorizedError",
    "PropertyNotAvailableError",
    "InternalInvariantError",
    "is_caller_error",
]
