# tests/test_cli.py
"""
Testes da CLI (`stageconf dump`).
"""

import io
from pathlib import Path

import pytest
import yaml

from stageconf.cli import build_parser, main


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    code = main(argv, stdout=out, stderr=err)
    return code, out.getvalue(), err.getvalue()


def test_dump_prints_yaml(configuration_root: Path, expected_test_stage_tree):
    code, out, err = _run(["dump", str(configuration_root), "test"])

    assert code == 0
    assert yaml.safe_load(out) == expected_test_stage_tree
    assert err == ""


def test_dump_uses_environment(configuration_root: Path, monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", str(configuration_root))
    monkeypatch.delenv("STAGE", raising=False)

    code, out, _ = _run(["dump"])

    assert code == 0
    assert yaml.safe_load(out)["default_list"] == ["bar"]


def test_dump_inline_and_indent_options(configuration_root: Path):
    code, out, _ = _run(["dump", str(configuration_root), "test", "--inline", "1", "--indent", "4"])

    assert code == 0
    assert "databases: {redis: {master:" in out


def test_dump_debug_writes_events_to_stderr(configuration_root: Path):
    code, _, err = _run(["dump", str(configuration_root), "test", "-d"])

    assert code == 0
    assert '"level": "debug"' in err
    assert "STAGE = test" in err


def test_dump_reports_config_errors(tmp_path: Path):
    code, out, err = _run(["dump", str(tmp_path), "test"])

    assert code == 1
    assert out == ""
    assert err.startswith("stageconf: ")


def test_dump_reports_undecodable_file(tmp_path: Path):
    (tmp_path / "defaults").mkdir()
    (tmp_path / "defaults" / "main.yaml").write_bytes(b"defaults:\n  name: \xff\xfe\xfa\n")

    code, out, err = _run(["dump", str(tmp_path), "defaults"])

    assert code == 1
    assert out == ""
    assert err.startswith("stageconf: ")


def test_parser_defaults():
    args = build_parser().parse_args(["dump"])
    assert args.path is None
    assert args.stage is None
    assert args.inline == 10
    assert args.indent == 2
    assert args.debug is False


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
