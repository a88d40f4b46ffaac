# src/stageconf/core/config/loader.py
"""
Loader canônico de configuração em camadas do stageconf.

A configuração efetiva é resolvida a partir de:
    - o estágio `defaults` (obrigatório, sempre carregado primeiro)
    - um estágio nomeado (opcional, aplicado sobre `defaults`)

Responsabilidades do módulo:
    - Canonicalizar o diretório raiz quando ele existe
    - Carregar as camadas via `load_stage`
    - Resolver a configuração final via `distinct_merge`

Invariantes:
    - `defaults` é carregado exatamente uma vez
    - Valores do estágio nomeado têm precedência sobre `defaults`
    - Chaves presentes apenas em `defaults` são preservadas

Limites explícitos:
    - Não lê variáveis de ambiente (ver `discovery`)
    - Não mantém estado entre chamadas
"""

from pathlib import Path
from typing import Any, Optional

from ..diagnostics import ConfigLogger, NullLogger
from .merge import distinct_merge
from .stage_loader import load_stage


DEFAULT_STAGE = "defaults"


def resolve_root_path(path: str) -> str:
    """
    Retorna o caminho canônico (symlinks e `.` resolvidos) se ele existir;
    caso contrário, retorna a string recebida sem alterações.

    Um caminho inexistente não é erro aqui: a falha é adiada para o
    carregamento do estágio (`NoFilesFoundError`).
    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError):
        return path


def build_config(
    root_path: str,
    stage: str = DEFAULT_STAGE,
    *,
    logger: Optional[ConfigLogger] = None,
) -> Any:
    """
    Carrega e resolve a configuração efetiva de um estágio.

    Política de resolução:
        - `defaults` é sempre carregado
        - Se `stage != "defaults"`, o estágio é carregado e combinado
          sobre `defaults` (`distinct_merge(defaults, stage)`)
        - Se `stage == "defaults"`, nenhuma segunda leitura ocorre

    Args:
        root_path (str): Diretório raiz da configuração.
        stage (str): Estágio solicitado.
        logger (Optional[ConfigLogger]): Destino de diagnósticos.

    Returns:
        Any: Árvore de configuração final.

    Raises:
        NoFilesFoundError: Se `defaults` ou o estágio não tiverem arquivos.
        StageMismatchError: Se algum arquivo divergir do seu estágio.
    """
    logger = logger or NullLogger()

    defaults = load_stage(root_path, DEFAULT_STAGE, logger=logger)

    if stage == DEFAULT_STAGE:
        return defaults

    overlay = load_stage(root_path, stage, logger=logger)
    return distinct_merge(defaults, overlay)
