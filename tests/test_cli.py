import json
import sys
from pathlib import Path

import pytest

from hookwork import cli

BOOTSTRAP = '''
def setup(hooks):
    hooks.add_filter("double", lambda x: x * 2)
    hooks.add_filter("double", lambda x: x + 1, 9)
    hooks.add_filter("greet", lambda name, punct: "hello " + name + punct, accepted_args=2)
    hooks.add_action(["init", "d_init"], lambda _: print("Started"))
    hooks.add_action("init", lambda _: print("early"), 9)


def untyped(hooks):
    hooks.add_filter("loose", lambda value: value)
'''


@pytest.fixture
def bootstrap_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / "cli_bootstrap_plugin.py").write_text(BOOTSTRAP)
    monkeypatch.syspath_prepend(str(tmp_path))
    yield "cli_bootstrap_plugin"
    sys.modules.pop("cli_bootstrap_plugin", None)


def test_parser_supports_commands() -> None:
    parser = cli.build_parser()

    parsed = parser.parse_args(["apply", "double", "5", "--bootstrap", "mod:fn"])
    assert parsed.command == "apply"
    assert parsed.args == ["5"]
    assert parsed.bootstrap == ["mod:fn"]

    assert parser.parse_args(["describe"]).command == "describe"


def test_apply_prints_json_result(bootstrap_module: str, capsys) -> None:
    exit_code = cli.main(["apply", "double", "5", "--bootstrap", f"{bootstrap_module}:setup"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == 12


def test_apply_passes_non_json_args_as_strings(bootstrap_module: str, capsys) -> None:
    exit_code = cli.main(["apply", "greet", "world", "!", "--bootstrap", f"{bootstrap_module}:setup"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == "hello world!"


def test_apply_reports_arity_error(bootstrap_module: str, capsys) -> None:
    exit_code = cli.main(["apply", "greet", "world", "--bootstrap", f"{bootstrap_module}:setup"])

    assert exit_code == 1
    assert "error:" in capsys.readouterr().err


def test_do_runs_actions_in_priority_order(bootstrap_module: str, capsys) -> None:
    exit_code = cli.main(["do", "init", "--bootstrap", f"{bootstrap_module}:setup"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["early", "Started"]


def test_strict_flag_rejects_untyped_callbacks(bootstrap_module: str, capsys) -> None:
    exit_code = cli.main(["apply", "loose", "1", "--strict", "--bootstrap", f"{bootstrap_module}:untyped"])

    assert exit_code == 1
    assert "untyped parameter 'value'" in capsys.readouterr().err


def test_describe_lists_registered_hooks(bootstrap_module: str, capsys) -> None:
    exit_code = cli.main(["describe", "--bootstrap", f"{bootstrap_module}:setup"])

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "d_init: callbacks=1 min_priority=10 max_priority=10"
    assert "double: callbacks=2 min_priority=9 max_priority=10" in lines
    assert "init: callbacks=2 min_priority=9 max_priority=10" in lines


def test_invalid_bootstrap_target(capsys) -> None:
    exit_code = cli.main(["describe", "--bootstrap", "no_colon_here"])

    assert exit_code == 1
    assert "package.module:function" in capsys.readouterr().err


def test_arity_policy_override_skips_rejection(bootstrap_module: str, tmp_path: Path, capsys) -> None:
    config = tmp_path / "hookwork.yaml"
    config.write_text("arity_policy: reject\n")

    exit_code = cli.main(
        [
            "--config",
            str(config),
            "--arity-policy",
            "truncate",
            "apply",
            "double",
            "2",
            "--bootstrap",
            f"{bootstrap_module}:setup",
        ]
    )

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == 6


def test_no_command_prints_help(capsys) -> None:
    assert cli.main([]) == 1
    assert "usage:" in capsys.readouterr().out
