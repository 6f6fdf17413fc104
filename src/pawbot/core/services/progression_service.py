"""
Sequenciador de progressão: corações, sessão e upgrade.

Cada passo busca um estado novo do servidor antes de decidir e só age
quando a condição ainda não está satisfeita.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

from pawbot.config.constants import (
    CONFLICT_PLAYER_IN_SESSION,
    CONFLICT_UPGRADE_IN_PROGRESS,
    SESSION_DURATION_SECONDS,
)
from pawbot.config.models import GameConfig
from pawbot.core.domain import AcaoResultado, PlayerState, ProgressaoResult, RequestContext
from pawbot.core.exceptions import ConflictException, TransientServerException
from pawbot.interfaces.services import IGameAPIService
from .base_service import BaseService


class ProgressionService(BaseService):
    """Garante corações, sessão ativa e upgrade, nesta ordem."""

    def __init__(
        self,
        game_api: IGameAPIService,
        config: Optional[GameConfig] = None,
        logger: Optional[Any] = None,
        relogio: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(logger, relogio)
        self.game_api = game_api
        self.config = config or GameConfig()

    def garantir_coracoes(
        self, contexto: RequestContext, estado: Optional[PlayerState] = None
    ) -> AcaoResultado:
        """
        Compra um coração quando o saldo está abaixo do mínimo.

        Falha temporária do servidor (5xx) é registrada e ignorada.
        """
        estado = estado or self.game_api.obter_estado(contexto)

        if estado.hearts >= self.config.min_hearts:
            self.logger.debug(f"Corações suficientes ({estado.hearts})")
            return AcaoResultado.IGNORADA

        self.logger.info(f"Corações abaixo do mínimo ({estado.hearts}), comprando 1...")
        try:
            total = self.game_api.comprar_coracao(contexto, 1)
        except TransientServerException as e:
            self.logger.aviso(
                "Servidor indisponível para compra de coração, seguindo sem reposição",
                status_code=e.status_code,
            )
            return AcaoResultado.INDISPONIVEL

        self.logger.sucesso(f"Coração comprado. Total atual: {total}")
        return AcaoResultado.EXECUTADA

    def garantir_sessao(self, contexto: RequestContext) -> AcaoResultado:
        estado = self.game_api.obter_estado(contexto)

        if estado.sessao_ativa(self.agora()):
            self.logger.info(f"Sessão ativa até {estado.last_session_end_time.isoformat()}")
            return AcaoResultado.IGNORADA

        try:
            self.game_api.iniciar_sessao(contexto)
        except ConflictException as e:
            if e.server_message != CONFLICT_PLAYER_IN_SESSION:
                raise
            self.logger.info("Jogador já está em sessão, atualizando estado")
            self.game_api.obter_estado(contexto)
            return AcaoResultado.CONFLITO

        self.logger.sucesso(f"Nova sessão iniciada por {SESSION_DURATION_SECONDS // 3600} horas")
        return AcaoResultado.EXECUTADA

    def garantir_upgrade(self, contexto: RequestContext) -> AcaoResultado:
        estado = self.game_api.obter_estado(contexto)

        if estado.upgrade_em_andamento(self.agora()):
            self.logger.info(f"Upgrade em andamento até {estado.upgrade_complete_time.isoformat()}")
            return AcaoResultado.IGNORADA

        try:
            self.game_api.upgrade(contexto)
        except ConflictException as e:
            if e.server_message != CONFLICT_UPGRADE_IN_PROGRESS:
                raise
            self.logger.info("Upgrade já em andamento, atualizando estado")
            self.game_api.obter_estado(contexto)
            return AcaoResultado.CONFLITO

        self.logger.sucesso("Upgrade iniciado")
        return AcaoResultado.EXECUTADA

    def executar(
        self, contexto: RequestContext, estado: Optional[PlayerState] = None
    ) -> ProgressaoResult:
        """
        Executa os três passos em ordem fixa.

        Args:
            contexto: Contexto autenticado
            estado: Estado recém-buscado, usado apenas no passo de corações

        Returns:
            ProgressaoResult: Desfecho de cada passo
        """
        resultado = ProgressaoResult()
        resultado.coracoes = self.garantir_coracoes(contexto, estado)
        resultado.sessao = self.garantir_sessao(contexto)
        resultado.upgrade = self.garantir_upgrade(contexto)
        return resultado
