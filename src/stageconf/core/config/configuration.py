# src/stageconf/core/config/configuration.py
"""
Fachada pública de configuração do stageconf.

A `Configuration` reúne raiz, estágio e destino de diagnósticos, executa
o carregamento em camadas e expõe a árvore resultante apenas para leitura.

Uso típico:

    conf = Configuration("/app/configuration", "prod").load()
    conf.get("databases.redis.master.username")
    conf["logging"]
    "databases.redis" in conf

Decisões arquiteturais:
    - Raiz e estágio não informados vêm de `CONFIG_PATH` / `STAGE`
    - `load()` reconstrói a árvore inteira a cada chamada
    - Escrita via `conf[key] = value` ou `del conf[key]` é proibida

Limites explícitos:
    - `load()` não é thread-safe para a mesma instância
    - Instâncias distintas não compartilham estado
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable

from ..diagnostics import ConfigLogger, NullLogger
from .accessor import DotAccessor
from .discovery import (
    CONFIG_PATH_ENV,
    DEFAULT_LOCATIONS,
    STAGE_ENV,
    env_config_path,
    env_stage,
    find_config_directory,
)
from .dump import dump_yaml
from .errors import ConfigurationNotLoadedError, OperationNotAllowedError
from .loader import build_config, resolve_root_path


@runtime_checkable
class ConfigurationProtocol(Protocol):
    """Contrato mínimo de leitura consumido por componentes da aplicação."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def all(self) -> Any:
        ...


class ConfigurationAware:
    """Mixin para objetos que recebem uma configuração após a construção."""

    configuration: Optional[ConfigurationProtocol] = None

    def set_configuration(self, configuration: ConfigurationProtocol) -> None:
        self.configuration = configuration


class Configuration:
    """
    Configuração hierárquica carregada de `{path}/{stage}/*.yaml`.

    Args:
        path (Optional[str]): Diretório raiz. Padrão: `CONFIG_PATH` ou
            `/app/configuration`.
        stage (Optional[str]): Estágio. Padrão: `STAGE` ou `defaults`.
        logger (Optional[ConfigLogger]): Destino de diagnósticos.
            Padrão: `NullLogger`.
        environ (Optional[Mapping[str, str]]): Ambiente usado para os
            padrões acima. Padrão: `os.environ`.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        stage: Optional[str] = None,
        *,
        logger: Optional[ConfigLogger] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._path = ""
        self._stage = ""
        self._accessor: Optional[DotAccessor] = None

        self.set_path(env_config_path(environ) if path is None else path)
        self.set_stage(env_stage(environ) if stage is None else stage)
        self.set_logger(logger or NullLogger())

    @classmethod
    def auto(
        cls,
        stage: Optional[str] = None,
        *,
        candidates: Sequence[str] = DEFAULT_LOCATIONS,
        logger: Optional[ConfigLogger] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Configuration":
        """Cria uma instância com a raiz encontrada por `find_config_directory`."""
        path = find_config_directory(candidates, environ=environ)
        return cls(path, stage, logger=logger, environ=environ)

    # -----------------------------
    # Raiz, estágio e logger
    # -----------------------------
    @property
    def path(self) -> str:
        return self._path

    @property
    def stage(self) -> str:
        return self._stage

    def set_path(self, path: str) -> "Configuration":
        self._path = resolve_root_path(path)
        return self

    def set_stage(self, stage: str) -> "Configuration":
        self._stage = stage
        return self

    def set_logger(self, logger: ConfigLogger) -> "Configuration":
        self.logger = logger
        return self

    # -----------------------------
    # Carregamento
    # -----------------------------
    def load(self) -> "Configuration":
        self.logger.log(level="info", message=f"{CONFIG_PATH_ENV} = {self.path}")
        self.logger.log(level="info", message=f"{STAGE_ENV} = {self.stage}")

        tree = build_config(self.path, self.stage, logger=self.logger)
        self._accessor = DotAccessor(tree)

        self.logger.log(level="info", message="Configuração carregada.")
        return self

    @property
    def loaded(self) -> bool:
        return self._accessor is not None

    def _require_loaded(self) -> DotAccessor:
        if self._accessor is None:
            raise ConfigurationNotLoadedError()
        return self._accessor

    # -----------------------------
    # Leitura
    # -----------------------------
    def get(self, key: str, default: Any = None) -> Any:
        return self._require_loaded().get(key, default)

    def all(self) -> Any:
        return self._require_loaded().all()

    def dump(self, inline: int = 10, indent: int = 2) -> str:
        """Somente para debug."""
        return dump_yaml(self.all(), inline=inline, indent=indent)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(self.get(key))

    def __setitem__(self, key: str, value: Any) -> None:
        raise OperationNotAllowedError()

    def __delitem__(self, key: str) -> None:
        raise OperationNotAllowedError()

    def __repr__(self) -> str:
        return f"Configuration(path={self.path!r}, stage={self.stage!r}, loaded={self.loaded})"
