# ==== ERROR HIERARCHY MODULE ==== #
"""
Exception types raised by clrsKit algorithms and surfaces.

Every error carries a `category` for classification and a free-form
`metadata` dict that the CLI and API include in their reports.
"""

from typing import Any, Dict, Optional


class ClrsKitError(Exception):
    """Base error for all clrsKit components."""

    category: str = "runtime"

    def __init__(
        self,
        message: str,
        *,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.metadata: Dict[str, Any] = metadata or {}

    def __str__(self) -> str:
        return self.message


class UnknownAlgorithmError(ClrsKitError, KeyError):
    """Raised when an algorithm or partitioner name is not in the catalog."""

    category = "lookup"


class UnsupportedInputError(ClrsKitError, TypeError):
    """Raised when an algorithm receives elements it cannot handle."""

    category = "validation"


class HeapUnderflowError(ClrsKitError, IndexError):
    """Raised when reading or extracting from an empty heap."""

    category = "heap"


class InvalidKeyError(ClrsKitError, ValueError):
    """Raised when `increase_key` is called with a smaller key."""

    category = "heap"


class ConfigError(ClrsKitError):
    """Raised when configuration is invalid."""

    category = "config"
