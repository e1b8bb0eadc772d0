"""Hook manager: registration plus action and filter dispatch."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from hookwork.config import HookEngineConfig
from hookwork.dispatcher import HookDispatcher
from hookwork.models import HookCallback, HookName
from hookwork.registry import HookRegistry
from hookwork.signature import SignatureInspector


class HookManager:
    """In-process hook engine with deterministic callback ordering.

    Each instance owns its registry and active-hook stack, so independent
    managers never observe each other's hooks.
    """

    def __init__(self, config: HookEngineConfig | None = None, *, inspector: SignatureInspector | None = None) -> None:
        self.config = config or HookEngineConfig()
        self._registry = HookRegistry()
        self._dispatcher = HookDispatcher(
            self._registry,
            arity_policy=self.config.arity_policy,
            inspector=inspector,
            require_typed_parameters=self.config.require_typed_parameters,
        )

    @property
    def registry(self) -> HookRegistry:
        return self._registry

    def register(
        self,
        names: HookName | Iterable[HookName],
        callback: HookCallback,
        priority: int | None = None,
        accepted_args: int | None = None,
    ) -> None:
        if priority is None:
            priority = self.config.default_priority
        self._registry.register(names, callback, priority, accepted_args)

    def add_action(
        self,
        names: HookName | Iterable[HookName],
        callback: HookCallback,
        priority: int | None = None,
        accepted_args: int | None = None,
    ) -> None:
        """Register a side-effect callback; its return value still feeds the next callback."""
        self.register(names, callback, priority, accepted_args)

    def add_filter(
        self,
        names: HookName | Iterable[HookName],
        callback: HookCallback,
        priority: int | None = None,
        accepted_args: int | None = None,
    ) -> None:
        """Register a callback whose return value becomes the next accumulator."""
        self.register(names, callback, priority, accepted_args)

    def trigger(self, name: HookName, *args: Any, require_typed_parameters: bool | None = None) -> Any:
        return self._dispatcher.trigger(name, *args, require_typed_parameters=require_typed_parameters)

    def fire(self, name: HookName, *args: Any, require_typed_parameters: bool | None = None) -> None:
        self._dispatcher.fire(name, *args, require_typed_parameters=require_typed_parameters)

    apply_filter = trigger
    do_action = fire

    def has_hook(self, name: HookName) -> bool:
        return self._registry.has(name)

    def min_priority(self, name: HookName) -> int | None:
        return self._registry.min_priority(name)

    def max_priority(self, name: HookName) -> int | None:
        return self._registry.max_priority(name)

    @property
    def active_hooks(self) -> tuple[HookName, ...]:
        return self._dispatcher.active_hooks

    def is_active(self, name: HookName) -> bool:
        return self._dispatcher.is_active(name)
