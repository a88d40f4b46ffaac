# src/stageconf/core/config/merge.py
"""
Utilitário canônico de merge "distinto" de configuração.

Este módulo implementa a política oficial de merge utilizada pelo stageconf
para combinar os documentos YAML de um estágio entre si e, em seguida,
o estágio nomeado sobre o estágio `defaults`.

Política de merge (v1):
    - mapa associativo + mapa → merge recursivo por chave (o overlay vence)
    - lista + lista          → união deduplicada (append apenas do que falta)
    - escalar                → sobrescrita direta
    - overlay escalar na raiz → tratado como lista de um elemento

Classificação de associatividade:
    - `dict` não vazio cujas chaves NÃO são exatamente `0..n-1` em ordem
      é associativo
    - listas, `dict` vazio e `dict` com formato de lista não são associativos

Igualdade estrita (usada na deduplicação de listas):
    - escalares: mesmo tipo e mesmo valor (`1`, `1.0` e `True` são distintos)
    - listas: mesmo tamanho e elementos estritamente iguais, na ordem
    - mapas: mesmo conjunto de chaves e valores estritamente iguais
      (a ordem das chaves é ignorada)

Invariantes:
    - Nenhum input é mutado durante o processo
    - `distinct_merge(x)` é a identidade
    - `distinct_merge(x, x) == x`

Limites explícitos:
    - Não carrega arquivos
    - Não valida nomes de estágio
"""

import re
from copy import deepcopy
from typing import Any, Dict, Iterable, List, Tuple, Union

from .errors import ConfigMergeDepthError


MAX_MERGE_DEPTH = 256

Container = Union[Dict[Any, Any], List[Any]]

_NUMERIC_RE = re.compile(r"^\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*$")
_INT_KEY_RE = re.compile(r"-?[0-9]+")


def _as_int_key(key: Any) -> Any:
    """Valor inteiro de uma chave (`3`, `"200"`), ou None se não for inteira."""
    if type(key) is int:
        return key
    if isinstance(key, str) and _INT_KEY_RE.fullmatch(key):
        return int(key)
    return None


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def is_list_shaped(mapping: Dict[Any, Any]) -> bool:
    """Retorna True quando as chaves do mapa são exatamente `0..n-1`, em ordem."""
    return all(type(key) is int and key == index for index, key in enumerate(mapping))


def is_associative(value: Any) -> bool:
    """
    Classifica um nó como associativo (mapa) ou sequencial (lista).

    Coleções vazias são sempre classificadas como não associativas, de modo
    que um `{}` vazio se comporta como uma lista durante o merge.
    Valores escalares nunca são associativos.
    """
    if not isinstance(value, dict) or not value:
        return False
    return not is_list_shaped(value)


def is_numeric_key(key: Any) -> bool:
    """Chaves inteiras, reais ou strings numéricas (`"10"`, `"1.5"`)."""
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    if isinstance(key, str):
        return _NUMERIC_RE.match(key) is not None
    return False


def strict_equal(left: Any, right: Any) -> bool:
    """Igualdade estrutural estrita entre dois ConfigNodes."""
    if type(left) is not type(right):
        return False
    if isinstance(left, dict):
        if left.keys() != right.keys():
            return False
        return all(strict_equal(left[key], right[key]) for key in left)
    if isinstance(left, list):
        if len(left) != len(right):
            return False
        return all(strict_equal(a, b) for a, b in zip(left, right))
    return left == right


def _contains_strict(container: Container, value: Any) -> bool:
    items = container.values() if isinstance(container, dict) else container
    return any(strict_equal(item, value) for item in items)


def _as_container(value: Any) -> Container:
    # None vira coleção vazia; escalares viram lista de um elemento
    if is_container(value):
        return value
    if value is None:
        return []
    return [value]


def _items(container: Container) -> Iterable[Tuple[Any, Any]]:
    if isinstance(container, dict):
        return list(container.items())
    return list(enumerate(container))


def _has_key(container: Container, key: Any) -> bool:
    if isinstance(container, dict):
        return key in container
    return type(key) is int and 0 <= key < len(container)


def _assign(container: Container, key: Any, value: Any) -> None:
    if isinstance(container, dict):
        container[key] = value
    elif key < len(container):
        container[key] = value
    else:
        container.append(value)


def _append(container: Container, value: Any) -> None:
    if isinstance(container, list):
        container.append(value)
        return
    int_keys = [_as_int_key(key) for key in container]
    int_keys = [key for key in int_keys if key is not None]
    container[max(int_keys) + 1 if int_keys else 0] = value


def _merge_pair(base: Container, overlay: Any, depth: int) -> Container:
    """
    Aplica um único overlay sobre `base`, mutando `base` (que já é uma cópia
    de propriedade do chamador) e retornando o resultado.
    """
    if depth > MAX_MERGE_DEPTH:
        raise ConfigMergeDepthError(
            f"Profundidade máxima de merge excedida ({MAX_MERGE_DEPTH} níveis)"
        )

    if not is_container(overlay):
        overlay = [overlay]

    if not base:
        base = [] if isinstance(overlay, list) else {}

    promoted = False
    if isinstance(base, list) and isinstance(overlay, dict):
        # lista recebendo chaves de mapa: passa a ser indexada por posição
        base = dict(enumerate(base))
        promoted = True

    for key, value in _items(overlay):
        numeric = is_numeric_key(key)
        exists = _has_key(base, key)

        if not exists and not numeric:
            base[key] = value
            continue

        current = base[key] if exists else None

        if (is_container(value) or is_container(current)) and is_associative(value):
            _assign(base, key, _merge_pair(_as_container(current), value, depth + 1))
        elif not numeric and isinstance(value, list) and isinstance(current, list):
            _assign(base, key, _merge_pair(current, value, depth + 1))
        elif numeric:
            if not _contains_strict(base, value):
                _append(base, value)
        else:
            base[key] = value

    if promoted and is_list_shaped(base):
        return list(base.values())

    return base


def distinct_merge(base: Any, *overlays: Any) -> Any:
    """
    Realiza o merge distinto de N árvores de configuração.

    O merge é aplicado em pares, da esquerda para a direita: `base` com o
    primeiro overlay, o resultado com o segundo, e assim por diante.

    Política por chave/índice `k` com valor `v` do overlay:
        - `k` não numérico ausente na base → inserido como está
        - `v` associativo (e `v` ou `base[k]` é coleção) → merge recursivo
        - `v` e `base[k]` são listas sob chave nomeada → união deduplicada
        - `k` numérico → `v` é anexado se ainda não existir na base
        - caso contrário → `v` substitui `base[k]`

    Decisões arquiteturais:
        - Mapas mesclam campo a campo para que um estágio sobrescreva um
          único valor sem apagar os vizinhos
        - Listas acumulam entradas novas sem duplicar as existentes
        - O merge é puramente funcional (inputs são copiados)

    Args:
        base (Any): Árvore base (ex.: `defaults`).
        *overlays (Any): Árvores aplicadas em ordem sobre a base.

    Returns:
        Any: Nova árvore resultante.

    Raises:
        ConfigMergeDepthError: Se o aninhamento exceder `MAX_MERGE_DEPTH`.
    """
    result = deepcopy(base)
    if not overlays:
        return result

    result = _as_container(result)
    for overlay in overlays:
        result = _merge_pair(result, deepcopy(overlay), depth=0)

    return result
