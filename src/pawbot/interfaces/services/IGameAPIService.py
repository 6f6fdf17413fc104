"""Contrato para a API HTTP do jogo."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from pawbot.core.domain import (
        ClaimResult,
        LeaderboardEntry,
        Mission,
        MissionClaim,
        PlayerState,
        RequestContext,
    )


class IGameAPIService(ABC):
    """Operações request/response contra a API do jogo."""

    @abstractmethod
    def login(self, contexto: "RequestContext") -> "RequestContext":
        """Autentica a carteira no jogo e retorna o contexto com a identidade do jogador."""

    @abstractmethod
    def obter_estado(self, contexto: "RequestContext") -> "PlayerState":
        """Retorna o snapshot atual do jogador."""

    @abstractmethod
    def comprar_coracao(self, contexto: "RequestContext", quantidade: int = 1) -> int:
        """Compra corações e retorna a nova contagem."""

    @abstractmethod
    def iniciar_sessao(self, contexto: "RequestContext") -> None:
        """Inicia uma sessão de mineração."""

    @abstractmethod
    def upgrade(self, contexto: "RequestContext") -> None:
        """Solicita upgrade do jogador."""

    @abstractmethod
    def listar_missoes(self, contexto: "RequestContext") -> List["Mission"]:
        """Lista missões na ordem do servidor."""

    @abstractmethod
    def verificar_missao(self, contexto: "RequestContext", mission_id: Any) -> None:
        """Pede verificação de uma missão."""

    @abstractmethod
    def resgatar_missao(self, contexto: "RequestContext", mission_id: Any) -> "MissionClaim":
        """Resgata a recompensa de uma missão concluída."""

    @abstractmethod
    def resgatar_ouro(self, contexto: "RequestContext") -> "ClaimResult":
        """Resgata o ouro acumulado na bolsa."""

    @abstractmethod
    def obter_ranking(self, contexto: "RequestContext") -> "LeaderboardEntry":
        """Retorna posição e total de ouro do jogador."""
