"""Testes da classificação de erros HTTP e dos clientes de API."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

import requests

from pawbot.adapters.api import GameAPI, WalletAPI
from pawbot.config.models import ApiConfig
from pawbot.core.domain import MissionStatus, RequestContext
from pawbot.core.exceptions import (
    AccountNotFoundException,
    AuthenticationException,
    ConflictException,
    HTTPStatusException,
    InvalidAPIResponseException,
    RequestException,
    RequestTimeoutException,
    TransientServerException,
)

CONTEXTO = RequestContext(token="tok-123", wallet_address="0xabc")


def _resposta(status: int, corpo=None, texto: str | None = None) -> MagicMock:
    resposta = MagicMock(spec=requests.Response)
    resposta.status_code = status
    if texto is not None:
        resposta.content = texto.encode()
        resposta.json.side_effect = ValueError("não é json")
    elif corpo is None:
        resposta.content = b""
        resposta.json.side_effect = ValueError("vazio")
    else:
        resposta.content = b"{...}"
        resposta.json.return_value = corpo
    return resposta


class ApiTestCase(unittest.TestCase):

    def setUp(self) -> None:
        self.session = MagicMock(spec=requests.Session)
        self.config = ApiConfig(game_url="https://game.test/api/v1", wallet_url="https://wallet.test/api/v1")
        self.game = GameAPI(config=self.config, logger=MagicMock(), session=self.session)
        self.wallet = WalletAPI(config=self.config, logger=MagicMock(), session=self.session)

    def responder(self, status: int, corpo=None, texto: str | None = None) -> None:
        self.session.request.return_value = _resposta(status, corpo, texto)


class TestClassificacaoDeErros(ApiTestCase):

    def test_headers_com_token_bruto(self) -> None:
        self.responder(200, {"data": {}})

        self.game.iniciar_sessao(CONTEXTO)

        kwargs = self.session.request.call_args.kwargs
        self.assertEqual(kwargs["headers"]["Authorization"], "tok-123")
        self.assertEqual(kwargs["headers"]["Content-Type"], "application/json")
        self.assertEqual(kwargs["json"], {"walletAddress": "0xabc"})
        self.assertEqual(kwargs["timeout"], self.config.timeout)

    def test_conflito_por_mensagem(self) -> None:
        self.responder(400, {"message": "UPGRADE_IN_PROGRESS"})

        with self.assertRaises(ConflictException) as ctx:
            self.game.upgrade(CONTEXTO)
        self.assertEqual(ctx.exception.server_message, "UPGRADE_IN_PROGRESS")

    def test_5xx_transitorio(self) -> None:
        self.responder(500, {"message": "boom"})

        with self.assertRaises(TransientServerException):
            self.game.comprar_coracao(CONTEXTO)

    def test_401_autenticacao(self) -> None:
        self.responder(401, {"message": "unauthorized"})

        with self.assertRaises(AuthenticationException):
            self.game.obter_estado(CONTEXTO)

    def test_4xx_generico(self) -> None:
        self.responder(422, texto="erro")

        with self.assertRaises(HTTPStatusException) as ctx:
            self.game.obter_estado(CONTEXTO)
        self.assertEqual(ctx.exception.status_code, 422)
        self.assertNotIsInstance(ctx.exception, ConflictException)

    def test_timeout(self) -> None:
        self.session.request.side_effect = requests.exceptions.Timeout()

        with self.assertRaises(RequestTimeoutException):
            self.game.obter_estado(CONTEXTO)

    def test_erro_de_conexao(self) -> None:
        self.session.request.side_effect = requests.exceptions.ConnectionError("recusada")

        with self.assertRaises(RequestException):
            self.game.obter_estado(CONTEXTO)

    def test_corpo_nao_json(self) -> None:
        self.responder(200, texto="<html>")

        with self.assertRaises(InvalidAPIResponseException):
            self.game.obter_estado(CONTEXTO)


class TestGameAPI(ApiTestCase):

    def test_login_404_vira_conta_inexistente(self) -> None:
        self.responder(404, {"message": "not found"})

        with self.assertRaises(AccountNotFoundException):
            self.game.login(CONTEXTO)

    def test_login_retorna_contexto_com_jogador(self) -> None:
        self.responder(200, {"data": {"player": {"userId": 7, "username": "gato"}}})

        contexto = self.game.login(CONTEXTO)

        self.assertEqual(contexto.user_id, "7")
        self.assertEqual(contexto.username, "gato")
        self.assertEqual(contexto.wallet_address, "0xabc")

    def test_estado_do_jogador(self) -> None:
        self.responder(200, {"data": {"player": {
            "level": 3,
            "miningSpeed": 0.5,
            "bagCap": 1000,
            "hearts": 2,
            "unclaimedGold": 10,
            "lastAccumulateTime": "2024-05-01T12:00:00Z",
        }}})

        estado = self.game.obter_estado(CONTEXTO)

        self.assertEqual(estado.level, 3)
        self.assertEqual(estado.bag_cap, 1000.0)
        self.assertEqual(estado.last_accumulate_time.hour, 12)

    def test_lista_de_missoes_descarta_itens_invalidos(self) -> None:
        self.responder(200, {"data": [
            {"id": 1, "name": "Seguir", "status": "in_progress"},
            {"name": "sem id", "status": "completed"},
            {"id": 3, "name": "Nova", "status": "estranho"},
        ]})

        missoes = self.game.listar_missoes(CONTEXTO)

        self.assertEqual([m.id for m in missoes], [1, 3])
        self.assertEqual(missoes[1].status, MissionStatus.UNKNOWN)

    def test_lista_de_missoes_malformada(self) -> None:
        self.responder(200, {"data": {"missions": []}})

        with self.assertRaises(InvalidAPIResponseException):
            self.game.listar_missoes(CONTEXTO)

    def test_resgate_de_missao(self) -> None:
        self.responder(200, {"data": {"reward": 25}})

        resgate = self.game.resgatar_missao(CONTEXTO, 4)

        self.assertEqual(resgate.reward, 25)
        self.assertEqual(self.session.request.call_args.kwargs["json"], {"missionId": 4, "code": ""})

    def test_resgate_de_ouro_e_ranking(self) -> None:
        self.responder(200, {"data": {"claimedGold": 100, "player": {"balance": 900}}})
        resgate = self.game.resgatar_ouro(CONTEXTO)
        self.assertEqual((resgate.claimed_gold, resgate.balance), (100.0, 900.0))

        self.responder(200, {"data": {"yourPosition": 12, "yourTotalGold": 5000}})
        ranking = self.game.obter_ranking(CONTEXTO)
        self.assertEqual(ranking.position, 12)
        self.assertEqual(ranking.total_gold, 5000.0)


class TestWalletAPI(ApiTestCase):

    def test_criar_carteira_registra_e_faz_login(self) -> None:
        self.session.request.side_effect = [
            _resposta(200, {"data": {}}),
            _resposta(200, {"data": {"walletAddress": "0xnova"}}),
        ]

        endereco = self.wallet.criar_carteira(CONTEXTO)

        self.assertEqual(endereco, "0xnova")
        primeira, segunda = self.session.request.call_args_list
        self.assertEqual(primeira.args, ("POST", "https://wallet.test/api/v1/wallet/track"))
        self.assertEqual(primeira.kwargs["json"], {"type": "create"})
        self.assertEqual(segunda.args, ("POST", "https://wallet.test/api/v1/login"))

    def test_contar_indicacoes(self) -> None:
        self.responder(200, {"data": {"total": 3, "items": []}})

        total = self.wallet.contar_indicacoes(CONTEXTO)

        self.assertEqual(total, 3)
        self.assertEqual(self.session.request.call_args.kwargs["params"], {"page": 1, "size": 100})


if __name__ == "__main__":
    unittest.main()
