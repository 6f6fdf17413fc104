"""Serviço que executa um ciclo completo de automação."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

from pawbot.core.domain import CycleResult, RequestContext
from pawbot.interfaces.services import IGameAPIService
from .accumulation_service import AccumulationService
from .base_service import BaseService
from .mission_service import MissionService
from .progression_service import ProgressionService


class CycleService(BaseService):
    """
    Um ciclo: progressão, missões, espera da bolsa, resgate e ranking.

    Falhas graves propagam para o supervisor.
    """

    def __init__(
        self,
        game_api: IGameAPIService,
        progressao: ProgressionService,
        missoes: MissionService,
        acumulacao: AccumulationService,
        logger: Optional[Any] = None,
        relogio: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(logger, relogio)
        self.game_api = game_api
        self.progressao = progressao
        self.missoes = missoes
        self.acumulacao = acumulacao

    def executar(self, contexto: RequestContext) -> CycleResult:
        resultado = CycleResult(iniciado_em=self.agora())

        with self.logger.etapa("Progressão"):
            estado = self.game_api.obter_estado(contexto)
            self.logger.info(
                f"Nível {estado.level} | Velocidade {estado.mining_speed}/s | "
                f"Bolsa {estado.bag_cap} | Corações {estado.hearts}"
            )
            progressao = self.progressao.executar(contexto, estado)
        resultado.adicionar_etapa("progressao", True, dados=progressao.to_dict())

        with self.logger.etapa("Missões"):
            relatorio = self.missoes.executar(contexto)
        resultado.adicionar_etapa("missoes", not relatorio.falhas, dados=relatorio.to_dict())

        with self.logger.etapa("Acumulação"):
            plano = self.acumulacao.planejar(contexto)
            self.acumulacao.aguardar(plano.segundos)
            resgate, ranking = self.acumulacao.resgatar_e_reportar(contexto)
        resultado.adicionar_etapa("acumulacao", True, dados={"segundos": plano.segundos})

        resultado.ouro_resgatado = resgate.claimed_gold
        resultado.saldo = resgate.balance
        resultado.posicao = ranking.position
        return resultado
