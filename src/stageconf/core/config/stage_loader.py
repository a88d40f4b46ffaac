# src/stageconf/core/config/stage_loader.py
"""
Loader de estágio do stageconf.

Um estágio é um diretório `{root}/{stage}/` contendo um ou mais arquivos
`*.yaml`. Cada arquivo deve ter exatamente uma chave raiz, igual ao nome
do diretório:

    configuration/test/app.yaml
    ---------------------------
    test:
      logging: debug

Responsabilidades do módulo:
    - Localizar os arquivos do estágio via glob
    - Validar a chave raiz de cada arquivo contra o nome do diretório
    - Combinar o conteúdo de todos os arquivos via `distinct_merge`

Decisões arquiteturais:
    - A ordem dos arquivos é a do filesystem (não ordenada); nenhuma
      precedência entre arquivos do mesmo estágio deve ser assumida
    - Arquivos vazios são ignorados com diagnóstico, não com erro
    - Qualquer outra anomalia é fatal
"""

import glob
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml  # PyYAML

from ..diagnostics import ConfigLogger, NullLogger
from .errors import InvalidConfigRootTypeError, NoFilesFoundError, StageMismatchError
from .merge import distinct_merge


def stage_pattern(root_path: str, stage: str) -> str:
    """Padrão glob dos arquivos de um estágio."""
    return os.path.join(root_path, stage, "*.yaml")


def _parse_file(path: Path) -> Any:
    # bytes: o PyYAML detecta o encoding e reporta bytes inválidos como ReaderError
    with path.open("rb") as f:
        return yaml.safe_load(f)


def _unwrap_stage_document(path: Path, content: Any) -> Any:
    """
    Valida um documento de estágio e retorna o valor sob a chave raiz.

    Raises:
        InvalidConfigRootTypeError: Se a raiz do documento não for um dict.
        StageMismatchError: Se a raiz não for exatamente `{<diretório>: ...}`.
    """
    if not isinstance(content, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(content).__name__} ({path})"
        )

    directory = path.parent.name
    keys = list(content.keys())

    if keys != [directory]:
        actual = ", ".join(str(k) for k in keys if k != directory) or str(keys[0])
        raise StageMismatchError(directory, actual, str(path))

    return content[directory]


def load_stage(
    root_path: str,
    stage: str,
    *,
    logger: Optional[ConfigLogger] = None,
) -> Any:
    """
    Carrega e combina todos os arquivos YAML de um estágio.

    Política de carregamento:
        - Padrão: `{root_path}/{stage}/*.yaml`
        - Zero arquivos encontrados é erro
        - Arquivo vazio, ou com valor nulo sob a chave raiz, é ignorado
          (diagnóstico `info`)
        - A chave raiz do arquivo deve ser igual ao nome do diretório
        - O valor sob a chave raiz é combinado no acumulador

    Args:
        root_path (str): Diretório raiz da configuração.
        stage (str): Nome do estágio (subdiretório).
        logger (Optional[ConfigLogger]): Destino de diagnósticos.

    Returns:
        Any: Árvore do estágio, sem a chave raiz `{stage}`.

    Raises:
        NoFilesFoundError: Se o padrão não encontrar nenhum arquivo.
        InvalidConfigRootTypeError: Se um documento não for um mapa.
        StageMismatchError: Se a chave raiz de um arquivo divergir do estágio.
        yaml.YAMLError: Se um arquivo tiver sintaxe YAML inválida ou bytes
            inválidos para o encoding detectado (`yaml.reader.ReaderError`).
    """
    logger = logger or NullLogger()
    pattern = stage_pattern(root_path, stage)
    files: List[str] = glob.glob(pattern)

    if not files:
        raise NoFilesFoundError(pattern, root_path, stage)

    logger.log(level="debug", message="Arquivos de configuração encontrados", files=files)

    config: Dict[str, Any] = {}
    for filename in files:
        path = Path(filename)
        content = _parse_file(path)

        if not content:
            logger.log(level="info", message=f"Arquivo {filename} está vazio. Ignorado.", file=filename)
            continue

        value = _unwrap_stage_document(path, content)

        if value is None:
            logger.log(
                level="info",
                message=f"Arquivo {filename} não tem conteúdo sob [{path.parent.name}]. Ignorado.",
                file=filename,
            )
            continue

        logger.log(
            level="debug",
            message=f"Config {path.parent.name}/{path.name} [top={path.parent.name}] validada.",
            file=filename,
        )

        config = distinct_merge(config, value)

    return config
