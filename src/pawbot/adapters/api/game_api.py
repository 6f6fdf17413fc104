"""
Cliente da API do jogo Robot Cat.

Cada método é uma chamada request/response sem estado; o contexto
imutável carrega token e carteira.
"""

from __future__ import annotations

from typing import Any, List, Optional

import requests

from pawbot.config.constants import GAME_ENDPOINTS
from pawbot.config.models import ApiConfig
from pawbot.core.domain import (
    ClaimResult,
    LeaderboardEntry,
    Mission,
    MissionClaim,
    PlayerState,
    RequestContext,
)
from pawbot.core.exceptions import (
    AccountNotFoundException,
    HTTPStatusException,
    InvalidAPIResponseException,
)
from pawbot.interfaces.services import IGameAPIService
from .base_api import BaseAPIClient


class GameAPI(BaseAPIClient, IGameAPIService):
    """
    Cliente de API do jogo.

    Uso:
        api = GameAPI(config=config.api)
        contexto = api.login(contexto)
        estado = api.obter_estado(contexto)
    """

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        logger: Optional[Any] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        config = config or ApiConfig()
        super().__init__(config.game_url, config=config, logger=logger, session=session)

    def login(self, contexto: RequestContext) -> RequestContext:
        """
        Autentica a carteira no jogo.

        Raises:
            AccountNotFoundException: Se o servidor responder 404.
        """
        try:
            payload = self._request(
                "POST", GAME_ENDPOINTS["login"], contexto,
                json={"walletAddress": contexto.wallet_address},
            )
        except HTTPStatusException as e:
            if e.status_code == 404:
                raise AccountNotFoundException(404, e.server_message, e.url, cause=e) from e
            raise

        player = self.extrair(payload, "data", "player")
        user_id = str(player.get("userId", "")) if isinstance(player, dict) else ""
        username = str(player.get("username", "")) if isinstance(player, dict) else ""
        return contexto.com_jogador(user_id, username)

    def obter_estado(self, contexto: RequestContext) -> PlayerState:
        payload = self._request("GET", GAME_ENDPOINTS["state"], contexto)
        estado = PlayerState.from_api(self.extrair(payload, "data", "player"))
        self.logger.debug(
            f"Estado: nível {estado.level}, velocidade {estado.mining_speed}, "
            f"bolsa {estado.bag_cap}, corações {estado.hearts}"
        )
        return estado

    def comprar_coracao(self, contexto: RequestContext, quantidade: int = 1) -> int:
        payload = self._request(
            "POST", GAME_ENDPOINTS["buy_heart"], contexto,
            json={"quantity": quantidade},
        )
        try:
            return int(self.extrair(payload, "data", "player", "hearts"))
        except (TypeError, ValueError) as e:
            raise InvalidAPIResponseException("Contagem de corações inválida", cause=e) from e

    def iniciar_sessao(self, contexto: RequestContext) -> None:
        self._request(
            "POST", GAME_ENDPOINTS["session_start"], contexto,
            json={"walletAddress": contexto.wallet_address},
        )

    def upgrade(self, contexto: RequestContext) -> None:
        self._request(
            "POST", GAME_ENDPOINTS["upgrade"], contexto,
            json={"walletAddress": contexto.wallet_address},
        )

    def listar_missoes(self, contexto: RequestContext) -> List[Mission]:
        """
        Lista as missões na ordem devolvida pelo servidor.

        Itens sem ``id`` ou ``status`` são descartados com aviso.

        Raises:
            InvalidAPIResponseException: Se ``data`` não for uma lista.
        """
        payload = self._request("GET", GAME_ENDPOINTS["missions"], contexto)
        itens = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(itens, list):
            raise InvalidAPIResponseException(
                "Formato inválido da lista de missões",
                details={"payload": str(payload)[:200]}
            )

        missoes = []
        for item in itens:
            missao = Mission.from_api(item)
            if missao is None:
                self.logger.aviso(f"Missão inválida ignorada: {str(item)[:100]}")
                continue
            missoes.append(missao)
        return missoes

    def verificar_missao(self, contexto: RequestContext, mission_id: Any) -> None:
        self._request(
            "POST", GAME_ENDPOINTS["mission_verify"], contexto,
            json={"missionId": mission_id},
        )

    def resgatar_missao(self, contexto: RequestContext, mission_id: Any) -> MissionClaim:
        payload = self._request(
            "POST", GAME_ENDPOINTS["mission_claim"], contexto,
            json={"missionId": mission_id, "code": ""},
        )
        dados = payload.get("data") if isinstance(payload, dict) else None
        recompensa = dados.get("reward") if isinstance(dados, dict) else None
        return MissionClaim(mission_id=mission_id, reward=recompensa)

    def resgatar_ouro(self, contexto: RequestContext) -> ClaimResult:
        payload = self._request("POST", GAME_ENDPOINTS["claim"], contexto, json={})
        try:
            return ClaimResult(
                claimed_gold=float(self.extrair(payload, "data", "claimedGold")),
                balance=float(self.extrair(payload, "data", "player", "balance")),
            )
        except (TypeError, ValueError) as e:
            raise InvalidAPIResponseException("Valores de resgate inválidos", cause=e) from e

    def obter_ranking(self, contexto: RequestContext) -> LeaderboardEntry:
        payload = self._request("GET", GAME_ENDPOINTS["leaderboard"], contexto)
        total = self.extrair(payload, "data", "yourTotalGold")
        try:
            total_gold = float(total) if total is not None else 0.0
        except (TypeError, ValueError) as e:
            raise InvalidAPIResponseException("Total de ouro inválido", cause=e) from e
        return LeaderboardEntry(
            position=self.extrair(payload, "data", "yourPosition"),
            total_gold=total_gold,
        )
