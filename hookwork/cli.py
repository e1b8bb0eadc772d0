"""CLI entrypoint: bootstrap plugin callables into a manager and fire hooks."""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from collections.abc import Callable
from typing import Any

from hookwork.config import HookEngineConfig, load_effective_config
from hookwork.errors import HookError
from hookwork.hooks import HookManager
from hookwork.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _resolve_bootstrap(target: str) -> Callable[[HookManager], Any]:
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Bootstrap target must look like 'package.module:function', got {target!r}")
    module = importlib.import_module(module_name)
    func = getattr(module, attr, None)
    if not callable(func):
        raise ValueError(f"Bootstrap target {target!r} is not callable")
    return func


def _decode_arg(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _load_config(args: argparse.Namespace) -> HookEngineConfig:
    runtime: dict[str, Any] = {}
    if args.arity_policy:
        runtime["arity_policy"] = args.arity_policy
    return load_effective_config(config_path=args.config, runtime_override=runtime)


def _build_manager(args: argparse.Namespace) -> HookManager:
    manager = HookManager(_load_config(args))
    for target in args.bootstrap:
        logger.debug("Running bootstrap %s", target)
        _resolve_bootstrap(target)(manager)
    return manager


def _add_bootstrap_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument(
        "--bootstrap",
        action="append",
        default=[],
        metavar="MODULE:FUNC",
        help="Callable receiving the HookManager to register callbacks (repeatable)",
    )


def _add_trigger_args(cmd: argparse.ArgumentParser) -> None:
    _add_bootstrap_args(cmd)
    cmd.add_argument("hook", help="Hook name to trigger")
    cmd.add_argument("args", nargs="*", help="Hook arguments; JSON literals are decoded, anything else is a string")
    cmd.add_argument("--strict", action="store_true", help="Require type annotations on every callback parameter")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hookwork", description="Named-hook dispatch engine")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--trace-hooks", action="store_true", help="Log every registration and dispatch")
    parser.add_argument("--config", help="Optional engine config YAML")
    parser.add_argument("--arity-policy", choices=["reject", "truncate"], help="Override the configured arity policy")

    sub = parser.add_subparsers(dest="command")

    apply_cmd = sub.add_parser("apply", help="Apply a filter hook and print the result as JSON")
    _add_trigger_args(apply_cmd)

    do_cmd = sub.add_parser("do", help="Run an action hook")
    _add_trigger_args(do_cmd)

    describe = sub.add_parser("describe", help="List registered hooks")
    _add_bootstrap_args(describe)
    return parser


def _run_apply(args: argparse.Namespace) -> int:
    manager = _build_manager(args)
    result = manager.apply_filter(args.hook, *map(_decode_arg, args.args), require_typed_parameters=args.strict)
    print(json.dumps(result, default=str))
    return 0


def _run_do(args: argparse.Namespace) -> int:
    manager = _build_manager(args)
    manager.do_action(args.hook, *map(_decode_arg, args.args), require_typed_parameters=args.strict)
    return 0


def _run_describe(args: argparse.Namespace) -> int:
    manager = _build_manager(args)
    registry = manager.registry
    for name in sorted(registry.names()):
        print(
            f"{name}: callbacks={registry.callback_count(name)} "
            f"min_priority={registry.min_priority(name)} max_priority={registry.max_priority(name)}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, trace_hooks=args.trace_hooks)

    handlers = {"apply": _run_apply, "do": _run_do, "describe": _run_describe}
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (HookError, ValueError, ImportError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
