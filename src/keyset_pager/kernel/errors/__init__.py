"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ConfigurationError       (configuration.py)
    │   ├── UnboundedSourceRequiredError
    │   └── InvalidOrderingError
    ├── ExecutionError           (execution.py)
    │   └── CountUnavailableError
    └── ValidationError          (validation.py)
        ├── UnresolvableFieldError
        └── InvalidCursorError
"""

from keyset_pager.kernel.errors.base import BaseError
from keyset_pager.kernel.errors.configuration import (
    ConfigurationError,
    InvalidOrderingError,
    UnboundedSourceRequiredError,
)
from keyset_pager.kernel.errors.execution import (
    CountUnavailableError,
    ExecutionError,
    backend_faults,
)
from keyset_pager.kernel.errors.validation import (
    InvalidCursorError,
    UnresolvableFieldError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "CountUnavailableError",
    "ExecutionError",
    "InvalidCursorError",
    "InvalidOrderingError",
    "UnboundedSourceRequiredError",
    "UnresolvableFieldError",
    "ValidationError",
    "backend_faults",
]
