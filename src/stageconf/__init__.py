# src/stageconf/__init__.py
"""
stageconf: configuração hierárquica em YAML organizada por estágio.

Layout esperado em disco:

    {root}/defaults/*.yaml   → camada base, sempre carregada
    {root}/{stage}/*.yaml    → camada do estágio, aplicada sobre defaults

Cada arquivo tem uma única chave raiz igual ao nome do seu diretório.

Arquitetura em alto nível:
    - core.config.merge        → merge distinto (mapas por chave, listas por união)
    - core.config.stage_loader → descoberta e validação dos arquivos de um estágio
    - core.config.loader       → composição defaults + estágio
    - core.config.accessor     → leitura por notação de ponto com curinga
    - core.config.configuration → fachada `Configuration`
    - core.diagnostics         → eventos de diagnóstico estruturados
    - cli                      → comando `stageconf dump`
"""

from .core.config.configuration import Configuration, ConfigurationAware, ConfigurationProtocol
from .core.config.errors import (
    ConfigError,
    ConfigMergeDepthError,
    ConfigurationNotLoadedError,
    DirectoryNotFoundError,
    InvalidConfigRootTypeError,
    NoFilesFoundError,
    NotFoundError,
    OperationNotAllowedError,
    StageMismatchError,
)
from .core.config.merge import distinct_merge
from .core.diagnostics import EventLog, NullLogger

__version__ = "1.0.0"

__all__ = [
    "Configuration",
    "ConfigurationAware",
    "ConfigurationProtocol",
    "ConfigError",
    "ConfigMergeDepthError",
    "ConfigurationNotLoadedError",
    "DirectoryNotFoundError",
    "InvalidConfigRootTypeError",
    "NoFilesFoundError",
    "NotFoundError",
    "OperationNotAllowedError",
    "StageMismatchError",
    "distinct_merge",
    "EventLog",
    "NullLogger",
]
