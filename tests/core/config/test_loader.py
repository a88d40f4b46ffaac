# tests/core/config/test_loader.py
"""
Testes do loader de configuração em camadas (build_config).

Os testes asseguram que:
- `defaults` é sempre carregado
- o estágio nomeado tem precedência sobre `defaults`
- chaves presentes apenas em `defaults` são preservadas
- o estágio `defaults` não é carregado duas vezes
- o diretório raiz é canonicalizado apenas quando existe

Invariantes:
    - Nenhuma configuração parcial é retornada em caso de erro
"""

import os
from pathlib import Path

import pytest

try:
    from stageconf.core.config import loader as loader_module
    from stageconf.core.config.loader import build_config, resolve_root_path
    from stageconf.core.config.errors import NoFilesFoundError, StageMismatchError
except Exception as e:  # noqa: BLE001
    build_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha com mensagem orientada quando o loader não pode ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/stageconf/core/config/loader.py (build_config)\n"
            "- src/stageconf/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_end_to_end_stage_overlay(write_stage_file, tmp_path: Path):
    """
    Verifica o cenário canônico defaults + estágio.

    defaults: {logging: info, list: [bar]}
    test:     {list: [baz], logging: debug}
    → {logging: debug, list: [bar, baz]}
    """
    _require_imports()
    write_stage_file("defaults", "app.yaml", "defaults:\n  logging: info\n  list: [bar]\n")
    write_stage_file("test", "app.yaml", "test:\n  list: [baz]\n  logging: debug\n")

    out = build_config(str(tmp_path / "conf"), "test")
    assert out == {"logging": "debug", "list": ["bar", "baz"]}


def test_fixture_tree_for_test_stage(configuration_root: Path, expected_test_stage_tree):
    _require_imports()
    assert build_config(str(configuration_root), "test") == expected_test_stage_tree


def test_stage_value_wins_and_defaults_only_keys_survive(configuration_root: Path):
    _require_imports()
    out = build_config(str(configuration_root), "test")
    assert out["hotelbook_params"]["username"] == "TESt_USERNAME"
    assert out["hotelbook_params"]["password"] == "PASSWORD"
    assert out["databases"]["redis"]["master"]["password"] == "R_PASS"


def test_defaults_stage_loads_once(configuration_root: Path, monkeypatch):
    _require_imports()
    calls = []
    original = loader_module.load_stage

    def spy(root_path, stage, **kwargs):
        calls.append(stage)
        return original(root_path, stage, **kwargs)

    monkeypatch.setattr(loader_module, "load_stage", spy)

    out = build_config(str(configuration_root), "defaults")

    assert calls == ["defaults"]
    assert out["hotelbook_params"]["username"] == "USERNAME"
    assert out["default_list"] == ["bar"]


def test_named_stage_loads_defaults_first(configuration_root: Path, monkeypatch):
    _require_imports()
    calls = []
    original = loader_module.load_stage

    def spy(root_path, stage, **kwargs):
        calls.append(stage)
        return original(root_path, stage, **kwargs)

    monkeypatch.setattr(loader_module, "load_stage", spy)
    build_config(str(configuration_root), "test")

    assert calls == ["defaults", "test"]


def test_missing_defaults_raises(write_stage_file, tmp_path: Path):
    _require_imports()
    write_stage_file("test", "app.yaml", "test: {a: 1}\n")
    with pytest.raises(NoFilesFoundError) as exc:
        build_config(str(tmp_path / "conf"), "test")
    assert exc.value.stage == "defaults"


def test_missing_named_stage_raises(configuration_root: Path):
    _require_imports()
    with pytest.raises(NoFilesFoundError):
        build_config(str(configuration_root), "prod")


def test_mismatch_in_named_stage_raises(configuration_root: Path):
    _require_imports()
    (configuration_root / "prod").mkdir()
    (configuration_root / "prod" / "app.yaml").write_text("test:\n  a: 1\n", encoding="utf-8")

    with pytest.raises(StageMismatchError):
        build_config(str(configuration_root), "prod")


def test_resolve_root_path_canonicalizes_existing(tmp_path: Path, monkeypatch):
    _require_imports()
    target = tmp_path / "real"
    target.mkdir()
    link = tmp_path / "link"
    os.symlink(target, link)

    assert resolve_root_path(str(link)) == str(target.resolve())

    monkeypatch.chdir(tmp_path)
    assert resolve_root_path("./real") == str(target.resolve())


def test_resolve_root_path_keeps_missing_path_literal(tmp_path: Path):
    _require_imports()
    missing = str(tmp_path / "nope" / ".." / "nope")
    assert resolve_root_path(missing) == missing
