"""Serviço de autenticação na carteira e no jogo."""

from __future__ import annotations

from typing import Any, Optional

from pawbot.core.domain import RequestContext
from pawbot.core.exceptions import AccountNotFoundException
from pawbot.interfaces.services import IGameAPIService, IWalletAPIService
from .base_service import BaseService


class AuthService(BaseService):
    """
    Faz login no jogo, criando a carteira quando a conta não existe.

    A criação da carteira seguida de novo login acontece no máximo
    ``max_tentativas`` vezes por chamada de :meth:`autenticar`.
    """

    def __init__(
        self,
        game_api: IGameAPIService,
        wallet_api: IWalletAPIService,
        logger: Optional[Any] = None,
        max_tentativas: int = 1,
    ):
        super().__init__(logger)
        self.game_api = game_api
        self.wallet_api = wallet_api
        self.max_tentativas = max_tentativas

    def autenticar(self, contexto: RequestContext) -> RequestContext:
        """
        Autentica e retorna um novo contexto com carteira e jogador.

        Raises:
            AccountNotFoundException: Se a conta continuar inexistente após as tentativas.
        """
        tentativas = 0

        while True:
            try:
                autenticado = self.game_api.login(contexto)
            except AccountNotFoundException:
                if tentativas >= self.max_tentativas:
                    self.logger.erro("Conta de jogo continua inexistente após criar carteira", exc_info=False)
                    raise
                tentativas += 1
                self.logger.aviso("Conta de jogo não encontrada, criando nova carteira...")
                contexto = self._criar_carteira(contexto)
                continue

            self.logger.info(
                f"Logado no jogo como: {autenticado.username} (ID: {autenticado.user_id})"
            )
            return autenticado

    def _criar_carteira(self, contexto: RequestContext) -> RequestContext:
        try:
            endereco = self.wallet_api.criar_carteira(contexto)
        except Exception as e:
            self.logger.erro(f"Falha ao criar carteira: {e}", exception=e)
            raise

        self.logger.sucesso(f"Nova carteira criada: {endereco}")
        return contexto.com_carteira(endereco)
