"""
Agendador de acumulação.

Calcula quanto falta para a bolsa encher, espera com contagem regressiva
visível e então resgata o ouro e consulta o ranking.
"""

from __future__ import annotations

import math
import time
from datetime import datetime
from typing import Any, Callable, Optional, Tuple

from pawbot.config.constants import CURRENCY
from pawbot.core.domain import ClaimResult, LeaderboardEntry, PlanoAcumulacao, PlayerState, RequestContext
from pawbot.core.exceptions import InvalidAPIResponseException
from pawbot.interfaces.services import IGameAPIService
from .base_service import BaseService


def calcular_espera(estado: PlayerState, agora: datetime) -> PlanoAcumulacao:
    """
    Segundos até a bolsa encher, nunca menos que 1.

    Sem ``lastAccumulateTime`` o tempo decorrido é zero.

    Raises:
        InvalidAPIResponseException: Se a velocidade de mineração não for positiva.
    """
    if estado.mining_speed <= 0:
        raise InvalidAPIResponseException(
            "Velocidade de mineração inválida",
            details={"mining_speed": estado.mining_speed}
        )

    decorrido = 0.0
    if estado.last_accumulate_time is not None:
        decorrido = (agora - estado.last_accumulate_time).total_seconds()

    ouro_atual = decorrido * estado.mining_speed + estado.unclaimed_gold
    restante = estado.bag_cap - ouro_atual
    segundos = max(math.ceil(restante / estado.mining_speed), 1)

    return PlanoAcumulacao(segundos=segundos, ouro_atual=ouro_atual, capacidade=estado.bag_cap)


class AccumulationService(BaseService):
    """
    Espera a bolsa encher e resgata.

    ``contagem`` é qualquer objeto com ``iniciar(segundos)``,
    ``atualizar(restante)`` e ``finalizar()``.
    """

    def __init__(
        self,
        game_api: IGameAPIService,
        logger: Optional[Any] = None,
        contagem: Optional[Any] = None,
        relogio: Optional[Callable[[], datetime]] = None,
        monotonic: Callable[[], float] = time.monotonic,
        dormir: Callable[[float], None] = time.sleep,
    ):
        super().__init__(logger, relogio)
        self.game_api = game_api
        self.contagem = contagem
        self._monotonic = monotonic
        self._dormir = dormir

    calcular_espera = staticmethod(calcular_espera)

    def planejar(self, contexto: RequestContext) -> PlanoAcumulacao:
        estado = self.game_api.obter_estado(contexto)
        plano = calcular_espera(estado, self.agora())
        self.logger.info(
            f"Ouro atual: {plano.ouro_atual:.2f}/{plano.capacidade:.2f} {CURRENCY}. "
            f"Bolsa cheia em {plano.minutos} minutos"
        )
        return plano

    def aguardar(self, segundos: int) -> None:
        """
        Espera em tempo real até o prazo, atualizando a contagem a cada segundo.

        O prazo vem do relógio monotônico; cada tick dorme até o próximo
        segundo cheio a partir do início, sem acumular atraso.
        """
        inicio = self._monotonic()
        prazo = inicio + segundos
        if self.contagem is not None:
            self.contagem.iniciar(segundos)

        tick = 0
        try:
            while True:
                tick += 1
                self._dormir(max(0.0, inicio + tick - self._monotonic()))
                restante = math.ceil(prazo - self._monotonic())
                if restante <= 0:
                    break
                if self.contagem is not None:
                    self.contagem.atualizar(restante)
        finally:
            if self.contagem is not None:
                self.contagem.finalizar()

    def resgatar_e_reportar(self, contexto: RequestContext) -> Tuple[ClaimResult, LeaderboardEntry]:
        resgate = self.game_api.resgatar_ouro(contexto)
        self.logger.sucesso(
            f"Resgatado {resgate.claimed_gold:.2f} {CURRENCY}. Saldo: {resgate.balance:.2f} {CURRENCY}"
        )

        ranking = self.game_api.obter_ranking(contexto)
        self.logger.info(
            f"Posição no ranking: {ranking.position} | Ouro total: {ranking.total_gold:.2f} {CURRENCY}"
        )
        return resgate, ranking

    def executar(self, contexto: RequestContext) -> Tuple[PlanoAcumulacao, ClaimResult, LeaderboardEntry]:
        """Planeja, espera e resgata."""
        plano = self.planejar(contexto)
        self.aguardar(plano.segundos)
        resgate, ranking = self.resgatar_e_reportar(contexto)
        return plano, resgate, ranking
