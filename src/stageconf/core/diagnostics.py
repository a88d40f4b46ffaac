# src/stageconf/core/diagnostics.py
"""
Diagnósticos estruturados do stageconf.

Logs não são strings livres: cada diagnóstico é um evento estruturado
(`dict`) com nível, mensagem, timestamp UTC e campos extras arbitrários.

Componentes:
    - ConfigLogger → protocolo mínimo aceito pelo loader (`log(...)`)
    - NullLogger   → implementação padrão que descarta tudo
    - EventLog     → coleta eventos em memória e, opcionalmente, os ecoa
                     como JSON lines em um stream (ex.: stderr na CLI)

Limites explícitos:
    - Não configura o módulo `logging` da biblioteca padrão
    - Não persiste eventos em disco
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, TextIO, runtime_checkable


LEVELS: Dict[str, int] = {
    "debug": 10,
    "info": 20,
    "warning": 30,
    "error": 40,
}


@runtime_checkable
class ConfigLogger(Protocol):
    """Destino de diagnósticos injetado no loader e na `Configuration`."""

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        ...


class NullLogger:
    """Descarta todos os eventos."""

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        return None


@dataclass
class EventLog:
    """
    Coletor de eventos estruturados.

    Campos:
    - min_level: eventos abaixo deste nível são ignorados
    - stream: quando definido, cada evento aceito é escrito como uma linha JSON
    - events: eventos aceitos, em ordem de emissão
    """

    min_level: str = "debug"
    stream: Optional[TextIO] = None
    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        if LEVELS.get(level, 0) < LEVELS.get(self.min_level, 0):
            return

        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

        if self.stream is not None:
            self.stream.write(json.dumps(event, ensure_ascii=False, default=str) + "\n")

    def messages(self, level: Optional[str] = None) -> List[str]:
        return [e["message"] for e in self.events if level is None or e["level"] == level]
