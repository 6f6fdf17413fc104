"""Entidade de estado do jogador."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pawbot.core.exceptions import InvalidAPIResponseException


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Converte um timestamp do servidor em datetime UTC.

    Aceita strings ISO-8601 (com ``Z`` ou offset) e números em
    milissegundos desde a época. Valores vazios resultam em ``None``.

    Raises:
        InvalidAPIResponseException: Se o valor não puder ser interpretado.
    """
    if value is None or value == "":
        return None

    if isinstance(value, bool):
        raise InvalidAPIResponseException("Timestamp inválido", details={"value": value})

    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)

    if isinstance(value, str):
        texto = value.strip()
        if texto.isdigit():
            return datetime.fromtimestamp(int(texto) / 1000, tz=timezone.utc)
        if texto.endswith(("Z", "z")):
            texto = texto[:-1] + "+00:00"
        try:
            resultado = datetime.fromisoformat(texto)
        except ValueError as e:
            raise InvalidAPIResponseException(
                "Timestamp inválido", details={"value": value}, cause=e
            ) from e
        if resultado.tzinfo is None:
            resultado = resultado.replace(tzinfo=timezone.utc)
        return resultado

    raise InvalidAPIResponseException(
        "Timestamp inválido", details={"value": value, "type": type(value).__name__}
    )


def _numero(dados: Mapping[str, Any], chave: str, padrao: Optional[float] = None) -> float:
    """Lê um campo numérico do payload do jogador."""
    valor = dados.get(chave, padrao)
    if valor is None:
        raise InvalidAPIResponseException(
            f"Campo obrigatório ausente no estado do jogador: {chave}",
            details={"campos": sorted(dados.keys())}
        )
    if isinstance(valor, bool):
        raise InvalidAPIResponseException(f"Campo {chave} não é numérico", details={"value": valor})
    try:
        return float(valor)
    except (TypeError, ValueError) as e:
        raise InvalidAPIResponseException(
            f"Campo {chave} não é numérico", details={"value": valor}, cause=e
        ) from e


@dataclass(frozen=True)
class PlayerState:
    """
    Snapshot autoritativo do servidor.

    Nunca é alterado localmente; cada decisão busca um novo snapshot.
    """

    level: int
    mining_speed: float
    bag_cap: float
    hearts: int
    unclaimed_gold: float
    last_accumulate_time: Optional[datetime]
    last_session_start_time: Optional[datetime] = None
    last_session_end_time: Optional[datetime] = None
    upgrade_complete_time: Optional[datetime] = None
    balance: float = 0.0

    @classmethod
    def from_api(cls, player: Mapping[str, Any]) -> PlayerState:
        """Monta o estado a partir de ``data.player``."""
        if not isinstance(player, Mapping):
            raise InvalidAPIResponseException(
                "Estado do jogador em formato inesperado",
                details={"type": type(player).__name__}
            )

        return cls(
            level=int(_numero(player, "level", 0)),
            mining_speed=_numero(player, "miningSpeed"),
            bag_cap=_numero(player, "bagCap"),
            hearts=int(_numero(player, "hearts", 0)),
            unclaimed_gold=_numero(player, "unclaimedGold", 0),
            last_accumulate_time=parse_timestamp(player.get("lastAccumulateTime")),
            last_session_start_time=parse_timestamp(player.get("lastSessionStartTime")),
            last_session_end_time=parse_timestamp(player.get("lastSessionEndTime")),
            upgrade_complete_time=parse_timestamp(player.get("upgradeCompleteTime")),
            balance=_numero(player, "balance", 0),
        )

    def sessao_ativa(self, agora: datetime) -> bool:
        """Sessão existente ainda não terminou."""
        if self.last_session_start_time is None or self.last_session_end_time is None:
            return False
        return agora < self.last_session_end_time

    def upgrade_em_andamento(self, agora: datetime) -> bool:
        """Upgrade anterior ainda não concluiu."""
        if self.upgrade_complete_time is None:
            return False
        return agora < self.upgrade_complete_time

    def to_dict(self) -> Dict[str, Any]:
        def _fmt(valor: Optional[datetime]) -> Optional[str]:
            return valor.isoformat() if valor else None

        return {
            "level": self.level,
            "mining_speed": self.mining_speed,
            "bag_cap": self.bag_cap,
            "hearts": self.hearts,
            "unclaimed_gold": self.unclaimed_gold,
            "last_accumulate_time": _fmt(self.last_accumulate_time),
            "last_session_start_time": _fmt(self.last_session_start_time),
            "last_session_end_time": _fmt(self.last_session_end_time),
            "upgrade_complete_time": _fmt(self.upgrade_complete_time),
            "balance": self.balance,
        }
