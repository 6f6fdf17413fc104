"""Entidades de missão."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class MissionStatus(str, Enum):
    """Ciclo de vida de uma missão no servidor."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CLAIMED = "claimed"
    UNKNOWN = "unknown"

    @classmethod
    def from_api(cls, valor: Any) -> MissionStatus:
        """Status não reconhecido vira ``UNKNOWN`` em vez de erro."""
        try:
            return cls(str(valor).strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Mission:
    """Missão retornada por ``GET /missions``."""

    id: Any
    name: str
    status: MissionStatus
    raw_status: str = ""

    @classmethod
    def from_api(cls, item: Any) -> Optional[Mission]:
        """
        Monta a missão a partir do item da lista.

        Returns:
            Mission ou None se o item não tiver ``id`` ou ``status``.
        """
        if not isinstance(item, Mapping):
            return None
        if not item.get("id") or not item.get("status"):
            return None

        return cls(
            id=item["id"],
            name=str(item.get("name") or "Unknown"),
            status=MissionStatus.from_api(item["status"]),
            raw_status=str(item["status"]),
        )

    @property
    def em_andamento(self) -> bool:
        return self.status is MissionStatus.IN_PROGRESS

    @property
    def concluida(self) -> bool:
        return self.status is MissionStatus.COMPLETED
