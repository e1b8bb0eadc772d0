"""In-process named-hook dispatch engine."""

from .config import HookEngineConfig, load_effective_config
from .errors import (
    CircularDependencyError,
    HookError,
    InvalidArityError,
    InvalidRegistrationError,
    UntypedCallbackError,
)
from .hooks import HookManager
from .models import ArityPolicy
from .signature import SignatureUnavailableError

__all__ = [
    "ArityPolicy",
    "CircularDependencyError",
    "HookEngineConfig",
    "HookError",
    "HookManager",
    "InvalidArityError",
    "InvalidRegistrationError",
    "SignatureUnavailableError",
    "UntypedCallbackError",
    "load_effective_config",
]
