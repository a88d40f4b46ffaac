# src/stageconf/core/config/dump.py
"""
Serialização da árvore de configuração para YAML (inspeção/debug).

Parâmetros:
    - inline: nível de aninhamento a partir do qual coleções são escritas
      em estilo inline (`{a: 1}`, `[x, y]`); coleções vazias são sempre inline
    - indent: quantidade de espaços por nível de indentação

Limites explícitos:
    - Não é um formato de persistência com garantia de round-trip
    - Não ordena chaves: a ordem da árvore é preservada
"""

from typing import Any

import yaml  # PyYAML


class _FlowDict(dict):
    pass


class _FlowList(list):
    pass


class _BlockDict(dict):
    pass


class _BlockList(list):
    pass


class _ConfigDumper(yaml.SafeDumper):
    pass


def _represent(flow: bool, mapping: bool):
    def representer(dumper: yaml.SafeDumper, data: Any) -> yaml.Node:
        if mapping:
            return dumper.represent_mapping("tag:yaml.org,2002:map", data, flow_style=flow)
        return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=flow)

    return representer


_ConfigDumper.add_representer(_FlowDict, _represent(flow=True, mapping=True))
_ConfigDumper.add_representer(_FlowList, _represent(flow=True, mapping=False))
_ConfigDumper.add_representer(_BlockDict, _represent(flow=False, mapping=True))
_ConfigDumper.add_representer(_BlockList, _represent(flow=False, mapping=False))


def _mark(node: Any, depth: int, inline: int) -> Any:
    """Envolve cada coleção no tipo que define seu estilo de saída."""
    if isinstance(node, dict):
        flow = depth >= inline or not node
        items = {key: _mark(value, depth + 1, inline) for key, value in node.items()}
        return _FlowDict(items) if flow else _BlockDict(items)

    if isinstance(node, list):
        flow = depth >= inline or not node
        items = [_mark(value, depth + 1, inline) for value in node]
        return _FlowList(items) if flow else _BlockList(items)

    return node


def dump_yaml(tree: Any, inline: int = 10, indent: int = 2) -> str:
    """
    Serializa `tree` em YAML.

    Args:
        tree (Any): Árvore de configuração.
        inline (int): Nível a partir do qual coleções ficam inline.
        indent (int): Espaços por nível.

    Returns:
        str: Texto YAML.
    """
    return yaml.dump(
        _mark(tree, 0, inline),
        Dumper=_ConfigDumper,
        indent=indent,
        allow_unicode=True,
        sort_keys=False,
        width=float("inf"),
    )
