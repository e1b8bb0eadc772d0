"""Exceptions raised by hook registration and dispatch."""

from __future__ import annotations


class HookError(Exception):
    """Base class for every hookwork failure."""


class CircularDependencyError(HookError, RuntimeError):
    def __init__(self, hook_name: str) -> None:
        super().__init__(f"Circular dependency for '{hook_name}'")
        self.hook_name = hook_name


class InvalidArityError(HookError, ValueError):
    def __init__(self, hook_name: str, available: int, required: int) -> None:
        super().__init__(
            f"Hook '{hook_name}' was triggered with {available} argument(s) "
            f"but a callback requires {required}"
        )
        self.hook_name = hook_name
        self.available = available
        self.required = required


class UntypedCallbackError(HookError, TypeError):
    def __init__(self, hook_name: str, parameter: str | None) -> None:
        if parameter is None:
            message = f"Hook '{hook_name}' has a callback whose signature cannot be inspected"
        else:
            message = f"Hook '{hook_name}' has a callback with untyped parameter '{parameter}'"
        super().__init__(message)
        self.hook_name = hook_name
        self.parameter = parameter


class InvalidRegistrationError(HookError, ValueError):
    """Malformed input to a register call; nothing was registered."""
