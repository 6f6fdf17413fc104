"""Pipeline de missões: verificar, reconferir e resgatar."""

from __future__ import annotations

from typing import Any, List, Optional

from pawbot.config.models import GameConfig
from pawbot.core.domain import Mission, MissionReport, RequestContext
from pawbot.core.exceptions import InvalidAPIResponseException, PawBotBaseException
from pawbot.interfaces.services import IGameAPIService, IWalletAPIService
from .base_service import BaseService
from .progression_service import ProgressionService


class MissionService(BaseService):
    """
    Processa as missões em andamento na ordem do servidor.

    A missão de convidar amigos só é tentada quando a carteira tem
    ao menos uma indicação. Falha em uma missão não interrompe as demais.
    """

    def __init__(
        self,
        game_api: IGameAPIService,
        wallet_api: IWalletAPIService,
        progressao: ProgressionService,
        config: Optional[GameConfig] = None,
        logger: Optional[Any] = None,
    ):
        super().__init__(logger)
        self.game_api = game_api
        self.wallet_api = wallet_api
        self.progressao = progressao
        self.config = config or GameConfig()

    def verificar_elegibilidade(self, contexto: RequestContext) -> bool:
        """Retorna True se a carteira tem indicações; falha conta como False."""
        try:
            total = self.wallet_api.contar_indicacoes(contexto)
        except PawBotBaseException as e:
            self.logger.erro(f"Falha ao consultar indicações: {e}", exception=e)
            return False

        self.logger.debug(f"Total de indicações: {total}")
        return total > 0

    def buscar_missoes(self, contexto: RequestContext) -> Optional[List[Mission]]:
        """Lista missões; None quando a lista não pôde ser obtida."""
        try:
            return self.game_api.listar_missoes(contexto)
        except InvalidAPIResponseException as e:
            self.logger.aviso(f"Lista de missões em formato inesperado: {e}")
        except PawBotBaseException as e:
            self.logger.erro(f"Falha ao buscar missões: {e}", exception=e)
        return None

    def _eh_convite(self, missao: Mission) -> bool:
        return str(missao.id) == str(self.config.invite_mission_id)

    def executar(self, contexto: RequestContext) -> MissionReport:
        relatorio = MissionReport()

        missoes = self.buscar_missoes(contexto)
        if missoes is None:
            self.logger.aviso("Pulando missões neste ciclo")
            return relatorio

        pendentes = [m for m in missoes if m.em_andamento]
        if not pendentes:
            self.logger.info("Nenhuma missão em andamento")
            return relatorio

        elegivel = self.verificar_elegibilidade(contexto)

        for missao in pendentes:
            if self._eh_convite(missao) and not elegivel:
                self.logger.aviso(f"Missão '{missao.name}' ignorada: carteira sem indicações")
                relatorio.ignoradas.append(missao.id)
                continue

            try:
                self._processar(contexto, missao, relatorio)
            except PawBotBaseException as e:
                self.logger.erro(f"Falha na missão '{missao.name}': {e}", exception=e)
                relatorio.falhas[missao.id] = str(e)

        return relatorio

    def _processar(self, contexto: RequestContext, missao: Mission, relatorio: MissionReport) -> None:
        log = self.logger.com_contexto(missao=missao.id)
        log.info(f"Verificando missão: {missao.name}")

        self.game_api.verificar_missao(contexto, missao.id)
        self.progressao.garantir_coracoes(contexto)
        relatorio.processadas.append(missao.id)

        atualizadas = self.buscar_missoes(contexto) or []
        atual = next((m for m in atualizadas if m.id == missao.id), None)
        if atual is None or not atual.concluida:
            log.debug("Missão ainda não concluída")
            return

        resgate = self.game_api.resgatar_missao(contexto, missao.id)
        relatorio.resgates.append(resgate)
        log.sucesso(f"Missão '{missao.name}' resgatada. Recompensa: {resgate.reward}")
