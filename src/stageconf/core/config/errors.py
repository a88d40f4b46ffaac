# src/stageconf/core/config/errors.py
"""
Exceções canônicas da camada de configuração do stageconf.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a descoberta de arquivos, validação de estágio, merge e acesso à
configuração carregada.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Todo erro de carregamento é fatal para a chamada de `load()`
    - Mensagens de erro são claras e direcionadas a quem edita os YAMLs

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma árvore parcial é retornada quando uma exceção é levantada

Limites explícitos:
    - Não realiza fallback, retry ou recovery
    - Não encapsula erros de sintaxe YAML (`yaml.YAMLError` propaga como está)
"""

from typing import Iterable


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do stageconf.

    Permite captura genérica de qualquer falha de carregamento ou acesso
    sem depender das subclasses concretas.
    """


class NotFoundError(ConfigError):
    """Algo obrigatório (arquivos de um estágio, diretório raiz) não existe."""


class NoFilesFoundError(NotFoundError):
    """
    Exceção levantada quando o padrão `{root}/{stage}/*.yaml` não encontra
    nenhum arquivo.

    Decisões arquiteturais:
        - Zero arquivos é sempre erro, nunca um estágio vazio
        - A mensagem inclui o padrão glob, o root e o estágio usados

    Limites explícitos:
        - Não tenta outros diretórios nem extensões alternativas (.yml)
    """

    def __init__(self, pattern: str, path: str, stage: str) -> None:
        self.pattern = pattern
        self.path = path
        self.stage = stage
        super().__init__(
            f"Nenhum arquivo encontrado. Padrão glob utilizado: {pattern}. "
            f"CONFIG_PATH={path} e STAGE={stage} estão corretos?"
        )


class DirectoryNotFoundError(NotFoundError):
    """
    Exceção levantada quando a descoberta automática esgota todos os
    diretórios candidatos sem encontrar nenhum existente.
    """

    def __init__(self, locations: Iterable[str]) -> None:
        self.locations = list(locations)
        super().__init__(
            "Diretório de configuração não encontrado nos caminhos conhecidos: "
            + ", ".join(self.locations)
        )


class StageMismatchError(ConfigError):
    """
    Exceção levantada quando a chave raiz de um arquivo YAML difere do nome
    do diretório (estágio) que o contém.

    Exemplo:
        - arquivo: configuration/test/app.yaml
        - conteúdo: {"prod": {...}}

    Decisões arquiteturais:
        - Indica erro de autoria do arquivo, nunca de ambiente
        - Nunca é corrigido automaticamente nem re-tentado

    Atributos:
        expected: nome do diretório (estágio esperado)
        actual: chave(s) raiz encontrada(s) no documento
        filename: caminho do arquivo inválido
    """

    def __init__(self, expected: str, actual: str, filename: str) -> None:
        self.expected = expected
        self.actual = actual
        self.filename = filename
        super().__init__(
            f"Erro de desenvolvimento! STAGE [{expected}] difere da raiz do arquivo [{actual}]. "
            f"Corrija o arquivo [{filename}]."
        )


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo não vazio
    não é um dicionário (`dict`).

    Invariantes:
        - O loader só opera sobre documentos do tipo mapa chave-valor
    """


class OperationNotAllowedError(ConfigError):
    """
    Exceção levantada em qualquer tentativa de escrita ou remoção através
    da interface de acesso por chave (`conf[key] = value`, `del conf[key]`).

    A árvore de configuração é somente leitura após `load()`.
    """

    def __init__(self, message: str = "Operação não permitida: a configuração é somente leitura.") -> None:
        super().__init__(message)


class ConfigurationNotLoadedError(ConfigError):
    """Acesso à árvore antes de `load()` ter sido chamado."""

    def __init__(self, message: str = "Configuração não carregada. O método `load()` foi chamado?") -> None:
        super().__init__(message)


class ConfigMergeDepthError(ConfigError):
    """
    Exceção levantada quando o merge ultrapassa a profundidade máxima
    de aninhamento suportada.
    """
