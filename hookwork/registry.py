"""Hook name to callback registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hookwork.errors import InvalidRegistrationError
from hookwork.models import CallbackRecord, HookCallback, HookEntry, HookName

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10


def _normalize_names(names: HookName | Iterable[HookName]) -> tuple[HookName, ...]:
    if isinstance(names, str):
        normalized: tuple[object, ...] = (names,)
    else:
        try:
            normalized = tuple(names)
        except TypeError:
            raise InvalidRegistrationError(f"Hook names must be a string or an iterable of strings, got {names!r}") from None

    if not normalized:
        raise InvalidRegistrationError("At least one hook name is required")
    for name in normalized:
        if not isinstance(name, str) or not name:
            raise InvalidRegistrationError(f"Invalid hook name: {name!r}")
    return normalized  # type: ignore[return-value]


class HookRegistry:
    """Stores callback records per hook name, bucketed by priority."""

    def __init__(self) -> None:
        self._entries: dict[HookName, HookEntry] = {}

    def register(
        self,
        names: HookName | Iterable[HookName],
        callback: HookCallback,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int | None = None,
    ) -> None:
        hook_names = _normalize_names(names)
        if not callable(callback):
            raise InvalidRegistrationError(f"Callback must be callable, got {callback!r}")
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidRegistrationError(f"Priority must be an integer, got {priority!r}")
        if accepted_args is not None and (
            isinstance(accepted_args, bool) or not isinstance(accepted_args, int) or accepted_args < 0
        ):
            raise InvalidRegistrationError(f"accepted_args must be a non-negative integer, got {accepted_args!r}")

        record = CallbackRecord(callback=callback, accepted_args=accepted_args)
        for name in hook_names:
            entry = self._entries.get(name)
            if entry is None:
                entry = self._entries[name] = HookEntry()
            entry.add(record, priority)
            logger.debug("Registered callback %r on hook %s (priority=%s)", callback, name, priority)

    def get(self, name: HookName) -> HookEntry | None:
        return self._entries.get(name)

    def has(self, name: HookName) -> bool:
        entry = self._entries.get(name)
        return entry is not None and len(entry) > 0

    def names(self) -> list[HookName]:
        return list(self._entries)

    def callback_count(self, name: HookName) -> int:
        entry = self._entries.get(name)
        return len(entry) if entry is not None else 0

    def min_priority(self, name: HookName) -> int | None:
        entry = self._entries.get(name)
        return entry.min_priority if entry is not None else None

    def max_priority(self, name: HookName) -> int | None:
        entry = self._entries.get(name)
        return entry.max_priority if entry is not None else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._entries)
