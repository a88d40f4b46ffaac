# tests/conftest.py
"""
Fixtures compartilhados para testes do stageconf.

Este módulo define fixtures reutilizáveis que fornecem:
- uma árvore de configuração realista em `tests/fixtures/configuration`
- uma cópia isolada dessa árvore em `tmp_path`
- um utilitário para escrever arquivos de estágio ad hoc
- a configuração final esperada para o estágio `test`

Decisões arquiteturais:
    - Fixtures que escrevem em disco usam sempre `tmp_path`
    - A árvore versionada em `tests/fixtures` nunca é alterada pelos testes
    - Dados retornados são determinísticos

Limites explícitos:
    - Não contém lógica de merge ou validação
    - Não substitui testes de integração da CLI
"""

import shutil
from pathlib import Path
from typing import Any, Callable, Dict

import pytest


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_configuration_dir() -> Path:
    """Árvore versionada (somente leitura) com os estágios `defaults` e `test`."""
    return FIXTURES_DIR / "configuration"


@pytest.fixture
def configuration_root(tmp_path: Path, fixtures_configuration_dir: Path) -> Path:
    """
    Cópia da árvore de fixtures em `tmp_path`.

    Permite que testes adicionem estágios ou arquivos sem afetar
    outros testes nem o repositório.
    """
    root = tmp_path / "configuration"
    shutil.copytree(fixtures_configuration_dir, root)
    return root


@pytest.fixture
def write_stage_file(tmp_path: Path) -> Callable[..., Path]:
    """
    Fábrica que escreve `{root}/{stage}/{name}` com o conteúdo YAML informado.

    Por padrão o root é `tmp_path / "conf"`.
    """

    def _write(stage: str, name: str, content: str, root: Path = None) -> Path:
        base = root if root is not None else tmp_path / "conf"
        path = base / stage / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def expected_test_stage_tree() -> Dict[str, Any]:
    """Configuração final esperada para `configuration_root` no estágio `test`."""
    return {
        "hotelbook_params": {
            "area_mapping": {
                "KRK": "Krakow",
                "MSK": "Moscow",
                "CHB": "Челябинск",
            },
            "url": "https://hotelbook.com/xml_endpoint",
            "username": "TESt_USERNAME",
            "password": "PASSWORD",
        },
        "logging": "info",
        "default_list": ["bar", "baz"],
        "databases": {
            "redis": {
                "master": {
                    "username": "R_USER",
                    "password": "R_PASS",
                },
            },
        },
    }


@pytest.fixture
def services_yaml() -> str:
    """Estágio `defaults` com múltiplos serviços, usado em consultas com curinga."""
    return """\
defaults:
  services:
    api:
      port: 8080
      hosts: [api-1, api-2]
    worker:
      port: 9090
    cron:
      schedule: "*/5 * * * *"
"""
