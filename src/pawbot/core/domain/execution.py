"""Resultados produzidos por cada serviço ao longo de um ciclo."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class AcaoResultado(str, Enum):
    """Desfecho de um passo do sequenciador."""

    EXECUTADA = "executada"
    IGNORADA = "ignorada"
    CONFLITO = "conflito"
    INDISPONIVEL = "indisponivel"


@dataclass
class EtapaResult:
    """Uma etapa do ciclo e, se falhou, o motivo."""
    nome: str
    sucesso: bool
    erro: Optional[str] = None
    dados: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ClaimResult:
    """Resposta de ``POST /player/claim``."""
    claimed_gold: float
    balance: float


@dataclass(frozen=True)
class LeaderboardEntry:
    """Posição do jogador no ranking."""
    position: Any
    total_gold: float


@dataclass(frozen=True)
class MissionClaim:
    """Recompensa de missão resgatada."""
    mission_id: Any
    reward: Any


@dataclass(frozen=True)
class PlanoAcumulacao:
    """Espera calculada até a bolsa encher."""
    segundos: int
    ouro_atual: float
    capacidade: float

    @property
    def minutos(self) -> int:
        return self.segundos // 60


@dataclass
class ProgressaoResult:
    """Desfecho de cada passo do sequenciador."""
    coracoes: AcaoResultado = AcaoResultado.IGNORADA
    sessao: AcaoResultado = AcaoResultado.IGNORADA
    upgrade: AcaoResultado = AcaoResultado.IGNORADA

    def to_dict(self) -> Dict[str, str]:
        return {
            "coracoes": self.coracoes.value,
            "sessao": self.sessao.value,
            "upgrade": self.upgrade.value,
        }


@dataclass
class MissionReport:
    """Resumo de uma passada do pipeline de missões."""
    processadas: List[Any] = field(default_factory=list)
    ignoradas: List[Any] = field(default_factory=list)
    resgates: List[MissionClaim] = field(default_factory=list)
    falhas: Dict[Any, str] = field(default_factory=dict)

    @property
    def vazio(self) -> bool:
        return not (self.processadas or self.ignoradas or self.resgates or self.falhas)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processadas": list(self.processadas),
            "ignoradas": list(self.ignoradas),
            "resgates": [{"mission_id": r.mission_id, "reward": r.reward} for r in self.resgates],
            "falhas": dict(self.falhas),
        }


@dataclass
class CycleResult:
    """Etapas, resgate e posição no ranking de um ciclo."""
    iniciado_em: datetime
    etapas: List[EtapaResult] = field(default_factory=list)
    ouro_resgatado: float = 0.0
    saldo: float = 0.0
    posicao: Any = None

    def adicionar_etapa(
        self,
        nome: str,
        sucesso: bool,
        erro: Optional[str] = None,
        dados: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.etapas.append(EtapaResult(nome, sucesso, erro, dados))

    def get_resumo(self) -> Dict[str, Any]:
        """Resumo plano do ciclo, pronto para ir ao log."""
        falhas = [e.nome for e in self.etapas if not e.sucesso]
        return {
            "iniciado_em": self.iniciado_em.isoformat(),
            "ouro_resgatado": self.ouro_resgatado,
            "saldo": self.saldo,
            "posicao": self.posicao,
            "etapas_ok": len(self.etapas) - len(falhas),
            "etapas_falha": len(falhas),
            "etapas_com_falha": falhas,
        }
