# src/stageconf/core/config/accessor.py
"""
Acesso somente leitura à árvore de configuração por notação de ponto.

Exemplos:
    get("databases.redis.master.username")
    get("services.*.port")        → lista com a porta de cada serviço
    get("default_list.0")         → primeiro elemento da lista
    get("missing.path", "x")      → "x"

Regras do caminho:
    - Segmentos são separados por `.`
    - `*` casa com todos os filhos do nível (mapa ou lista) e retorna uma
      lista com o resultado de cada ramo, na ordem da árvore
    - Um segmento numérico também casa com chaves inteiras e índices de lista
    - Chave ausente ou valor escalar no meio do caminho → `default` para
      aquele ramo

O acessor não expõe nenhum método de escrita.
"""

import re
from copy import deepcopy
from typing import Any, List


WILDCARD = "*"

_MISSING = object()

_INT_SEGMENT = re.compile(r"-?[0-9]+")
_INDEX_SEGMENT = re.compile(r"[0-9]+")


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, dict):
        if segment in node:
            return node[segment]
        if _INT_SEGMENT.fullmatch(segment) and int(segment) in node:
            return node[int(segment)]
        return _MISSING

    if isinstance(node, list) and _INDEX_SEGMENT.fullmatch(segment):
        index = int(segment)
        if index < len(node):
            return node[index]

    return _MISSING


def _children(node: Any) -> List[Any]:
    if isinstance(node, dict):
        return list(node.values())
    if isinstance(node, list):
        return list(node)
    return []


def _walk(node: Any, segments: List[str], default: Any) -> Any:
    for position, segment in enumerate(segments):
        if segment == WILDCARD:
            if not isinstance(node, (dict, list)):
                return default
            rest = segments[position + 1:]
            return [_walk(child, rest, default) for child in _children(node)]

        node = _child(node, segment)
        if node is _MISSING:
            return default

    return node


class DotAccessor:
    """Leitura por caminho pontuado sobre uma árvore de configuração."""

    def __init__(self, tree: Any) -> None:
        self._tree = tree

    def get(self, path: str, default: Any = None) -> Any:
        """
        Resolve `path` contra a árvore.

        O valor retornado é uma cópia: alterá-lo não afeta a árvore.
        Caminho vazio retorna a árvore inteira.
        """
        if path == "":
            return self.all()

        value = _walk(self._tree, path.split("."), default)
        if value is default:
            return default
        return deepcopy(value)

    def all(self) -> Any:
        return deepcopy(self._tree)
