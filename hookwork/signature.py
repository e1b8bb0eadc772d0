"""Callback signature inspection for strict-typing dispatch."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Protocol


class SignatureUnavailableError(Exception):
    """Raised by an inspector when a callback exposes no readable signature."""


class SignatureInspector(Protocol):
    def untyped_parameters(self, callback: Callable[..., Any]) -> list[str]:
        """Return parameter names lacking an annotation, in declaration order.

        Raises ``SignatureUnavailableError`` when no signature is available.
        """
        ...


def _resolve_signature(callback: Callable[..., Any]) -> inspect.Signature:
    # Older interpreters bind a static ``__call__`` as if it took ``self``.
    if not (inspect.isroutine(callback) or inspect.isclass(callback)):
        call = inspect.getattr_static(type(callback), "__call__", None)
        if isinstance(call, staticmethod):
            return inspect.signature(call.__func__)
    return inspect.signature(callback)


class InspectSignatureInspector:
    """Default inspector backed by :func:`inspect.signature`."""

    def untyped_parameters(self, callback: Callable[..., Any]) -> list[str]:
        try:
            signature = _resolve_signature(callback)
        except (TypeError, ValueError) as exc:
            raise SignatureUnavailableError(f"No signature for {callback!r}") from exc
        return [
            name
            for name, parameter in signature.parameters.items()
            if parameter.annotation is inspect.Parameter.empty
        ]
