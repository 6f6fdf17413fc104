"""Cliente da API da PawWallet."""

from __future__ import annotations

from typing import Any, Optional

import requests

from pawbot.config.constants import REFERRAL_PAGE_SIZE, WALLET_ENDPOINTS
from pawbot.config.models import ApiConfig
from pawbot.core.domain import RequestContext
from pawbot.core.exceptions import InvalidAPIResponseException
from pawbot.interfaces.services import IWalletAPIService
from .base_api import BaseAPIClient


class WalletAPI(BaseAPIClient, IWalletAPIService):
    """Criação de carteira, login da carteira e contagem de indicações."""

    def __init__(
        self,
        config: Optional[ApiConfig] = None,
        logger: Optional[Any] = None,
        session: Optional[requests.Session] = None,
        page_size: int = REFERRAL_PAGE_SIZE,
    ) -> None:
        config = config or ApiConfig()
        super().__init__(config.wallet_url, config=config, logger=logger, session=session)
        self.page_size = page_size

    def criar_carteira(self, contexto: RequestContext) -> str:
        """
        Registra a criação da carteira e faz login nela.

        Returns:
            str: Endereço da carteira.
        """
        self._request("POST", WALLET_ENDPOINTS["track"], contexto, json={"type": "create"})
        return self.login(contexto)

    def login(self, contexto: RequestContext) -> str:
        """Login na carteira; retorna ``data.walletAddress``."""
        payload = self._request("POST", WALLET_ENDPOINTS["login"], contexto, json={})
        endereco = self.extrair(payload, "data", "walletAddress")
        if not endereco:
            raise InvalidAPIResponseException("Login da carteira não retornou endereço")
        return str(endereco)

    def contar_indicacoes(self, contexto: RequestContext) -> int:
        payload = self._request(
            "GET", WALLET_ENDPOINTS["referral"], contexto,
            params={"page": 1, "size": self.page_size},
        )
        total = self.extrair(payload, "data", "total")
        try:
            return int(total or 0)
        except (TypeError, ValueError) as e:
            raise InvalidAPIResponseException(
                "Total de indicações inválido", details={"total": total}, cause=e
            ) from e
