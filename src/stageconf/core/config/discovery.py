# src/stageconf/core/config/discovery.py
"""
Resolução de raiz/estágio a partir do ambiente e descoberta automática
do diretório de configuração.

Variáveis de ambiente:
    - CONFIG_PATH → diretório raiz (padrão: `/app/configuration`)
    - STAGE       → estágio (padrão: `defaults`)

Valores vazios são tratados como ausentes.

A lista de candidatos da descoberta automática é um valor comum passado
por parâmetro; nenhum estado global é alterado.
"""

import os
from typing import Mapping, Optional, Sequence

from .errors import DirectoryNotFoundError
from .loader import DEFAULT_STAGE


CONFIG_PATH_ENV = "CONFIG_PATH"
STAGE_ENV = "STAGE"

DEFAULT_CONFIG_PATH = "/app/configuration"

DEFAULT_LOCATIONS = (
    "/app/configuration",
    "/configuration",
    "./configuration",
)


def get_env(name: str, default: str = "", environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(name) or default


def env_config_path(environ: Optional[Mapping[str, str]] = None) -> str:
    return get_env(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH, environ)


def env_stage(environ: Optional[Mapping[str, str]] = None) -> str:
    return get_env(STAGE_ENV, DEFAULT_STAGE, environ)


def find_config_directory(
    candidates: Sequence[str] = DEFAULT_LOCATIONS,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Retorna o primeiro diretório candidato existente, canonicalizado.

    Ordem de busca:
        1. `CONFIG_PATH` (se definido e não vazio)
        2. `candidates`, na ordem recebida

    Raises:
        DirectoryNotFoundError: Se nenhum candidato existir; a mensagem
            lista todos os caminhos tentados.
    """
    locations = list(candidates)

    from_env = get_env(CONFIG_PATH_ENV, "", environ).strip()
    if from_env:
        locations.insert(0, from_env)

    for location in locations:
        if os.path.isdir(location):
            return os.path.realpath(location)

    raise DirectoryNotFoundError(locations)
