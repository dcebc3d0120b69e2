"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError                 (application.py)
    │   └── ConfigError
    │       ├── MissingRequiredSettingError
    │       └── InvalidSettingValueError
    └── InfrastructureError              (infrastructure.py)
        └── DumpWriteError
"""

from mp_metrics.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_metrics.kernel.errors.base import BaseError
from mp_metrics.kernel.errors.infrastructure import DumpWriteError, InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "DumpWriteError",
    "InfrastructureError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
