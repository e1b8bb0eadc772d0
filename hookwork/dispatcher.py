"""Priority-ordered hook dispatch with a reentrancy guard."""

from __future__ import annotations

import logging
from typing import Any

from hookwork.errors import CircularDependencyError, InvalidArityError, UntypedCallbackError
from hookwork.models import ArityPolicy, CallbackRecord, HookName
from hookwork.registry import HookRegistry
from hookwork.signature import InspectSignatureInspector, SignatureInspector, SignatureUnavailableError

logger = logging.getLogger(__name__)


class HookDispatcher:
    """Runs a hook's callbacks in priority order, threading an accumulator.

    The active-hook stack shadows the synchronous call chain: a hook name may
    appear in it at most once, and every trigger pops its own entry on exit,
    including when a callback raises.
    """

    def __init__(
        self,
        registry: HookRegistry,
        *,
        arity_policy: ArityPolicy = ArityPolicy.REJECT,
        inspector: SignatureInspector | None = None,
        require_typed_parameters: bool = False,
    ) -> None:
        self._registry = registry
        self._arity_policy = ArityPolicy(arity_policy)
        self._inspector = inspector
        self._require_typed_parameters = require_typed_parameters
        self._active: list[HookName] = []

    @property
    def arity_policy(self) -> ArityPolicy:
        return self._arity_policy

    @property
    def active_hooks(self) -> tuple[HookName, ...]:
        return tuple(self._active)

    def is_active(self, name: HookName) -> bool:
        return name in self._active

    def trigger(self, name: HookName, *args: Any, require_typed_parameters: bool | None = None) -> Any:
        entry = self._registry.get(name)
        if entry is None or len(entry) == 0:
            return args[0] if args else None

        if name in self._active:
            raise CircularDependencyError(name)

        if entry.ensure_sorted():
            logger.debug("Sorted priorities for hook %s: %s", name, list(entry.buckets))
        records = tuple(entry.records())

        if self._arity_policy is ArityPolicy.REJECT:
            self._check_arity(name, records, len(args))

        strict = self._require_typed_parameters if require_typed_parameters is None else require_typed_parameters
        result = args[0] if args else None
        trailing = args[1:]

        logger.debug("Triggering hook %s (%s callbacks, strict=%s)", name, len(records), strict)
        self._active.append(name)
        try:
            for record in records:
                if strict:
                    self._check_typed(name, record)
                result = record.callback(*record.select_args((result, *trailing), self._arity_policy))
        finally:
            self._active.pop()
        return result

    def fire(self, name: HookName, *args: Any, require_typed_parameters: bool | None = None) -> None:
        self.trigger(name, *args, require_typed_parameters=require_typed_parameters)

    @staticmethod
    def _check_arity(name: HookName, records: tuple[CallbackRecord, ...], available: int) -> None:
        for record in records:
            if record.accepted_args is not None and record.accepted_args > available:
                raise InvalidArityError(name, available, record.accepted_args)

    def _check_typed(self, name: HookName, record: CallbackRecord) -> None:
        if self._inspector is None:
            self._inspector = InspectSignatureInspector()
        try:
            untyped = self._inspector.untyped_parameters(record.callback)
        except SignatureUnavailableError as exc:
            raise UntypedCallbackError(name, None) from exc
        if untyped:
            raise UntypedCallbackError(name, untyped[0])
