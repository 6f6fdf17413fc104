"""Testes do pipeline de missões."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from pawbot.config.models import GameConfig
from pawbot.core.domain import Mission, MissionClaim, MissionStatus, RequestContext
from pawbot.core.exceptions import (
    HTTPStatusException,
    InvalidAPIResponseException,
    RequestTimeoutException,
)
from pawbot.core.services import MissionService

CONTEXTO = RequestContext(token="tok", wallet_address="0xabc")


def _missao(mission_id, status: MissionStatus, nome: str = "Missão") -> Mission:
    return Mission(id=mission_id, name=nome, status=status, raw_status=status.value)


class TestMissionService(unittest.TestCase):

    def setUp(self) -> None:
        self.game_api = MagicMock()
        self.wallet_api = MagicMock()
        self.wallet_api.contar_indicacoes.return_value = 0
        self.progressao = MagicMock()
        self.service = MissionService(
            self.game_api,
            self.wallet_api,
            self.progressao,
            config=GameConfig(invite_mission_id=6),
            logger=MagicMock(),
        )

    def test_lista_malformada_pula_pipeline(self) -> None:
        self.game_api.listar_missoes.side_effect = InvalidAPIResponseException("não é lista")

        relatorio = self.service.executar(CONTEXTO)

        self.assertTrue(relatorio.vazio)
        self.game_api.verificar_missao.assert_not_called()
        self.wallet_api.contar_indicacoes.assert_not_called()

    def test_falha_ao_listar_pula_pipeline(self) -> None:
        self.game_api.listar_missoes.side_effect = RequestTimeoutException("timeout")

        relatorio = self.service.executar(CONTEXTO)

        self.assertTrue(relatorio.vazio)
        self.service.logger.erro.assert_called()

    def test_apenas_missoes_em_andamento(self) -> None:
        self.game_api.listar_missoes.return_value = [
            _missao(1, MissionStatus.NOT_STARTED),
            _missao(2, MissionStatus.CLAIMED),
            _missao(3, MissionStatus.UNKNOWN),
        ]

        relatorio = self.service.executar(CONTEXTO)

        self.game_api.verificar_missao.assert_not_called()
        self.assertTrue(relatorio.vazio)

    def test_convite_ignorado_sem_indicacoes(self) -> None:
        self.game_api.listar_missoes.return_value = [_missao(6, MissionStatus.IN_PROGRESS, "Convidar amigos")]

        relatorio = self.service.executar(CONTEXTO)

        self.assertEqual(relatorio.ignoradas, [6])
        self.game_api.verificar_missao.assert_not_called()

    def test_convite_processado_com_indicacoes(self) -> None:
        self.wallet_api.contar_indicacoes.return_value = 2
        self.game_api.listar_missoes.return_value = [_missao(6, MissionStatus.IN_PROGRESS)]

        relatorio = self.service.executar(CONTEXTO)

        self.game_api.verificar_missao.assert_called_once_with(CONTEXTO, 6)
        self.assertEqual(relatorio.processadas, [6])

    def test_falha_na_elegibilidade_conta_como_falso(self) -> None:
        self.wallet_api.contar_indicacoes.side_effect = HTTPStatusException(500)
        self.game_api.listar_missoes.return_value = [
            _missao(6, MissionStatus.IN_PROGRESS),
            _missao(7, MissionStatus.IN_PROGRESS),
        ]

        relatorio = self.service.executar(CONTEXTO)

        self.assertEqual(relatorio.ignoradas, [6])
        self.assertEqual(relatorio.processadas, [7])
        self.wallet_api.contar_indicacoes.assert_called_once()

    def test_verifica_rebusca_e_resgata_concluida(self) -> None:
        self.game_api.listar_missoes.side_effect = [
            [_missao(1, MissionStatus.IN_PROGRESS)],
            [_missao(1, MissionStatus.COMPLETED)],
        ]
        self.game_api.resgatar_missao.return_value = MissionClaim(mission_id=1, reward=50)

        relatorio = self.service.executar(CONTEXTO)

        self.game_api.verificar_missao.assert_called_once_with(CONTEXTO, 1)
        self.progressao.garantir_coracoes.assert_called_once_with(CONTEXTO)
        self.game_api.resgatar_missao.assert_called_once_with(CONTEXTO, 1)
        self.assertEqual(relatorio.resgates[0].reward, 50)

    def test_nao_resgata_se_ainda_em_andamento(self) -> None:
        self.game_api.listar_missoes.return_value = [_missao(1, MissionStatus.IN_PROGRESS)]

        relatorio = self.service.executar(CONTEXTO)

        self.game_api.resgatar_missao.assert_not_called()
        self.assertEqual(relatorio.processadas, [1])
        self.assertEqual(relatorio.resgates, [])

    def test_falha_em_uma_missao_nao_interrompe_as_demais(self) -> None:
        self.game_api.listar_missoes.side_effect = [
            [_missao(1, MissionStatus.IN_PROGRESS), _missao(2, MissionStatus.IN_PROGRESS)],
            [_missao(1, MissionStatus.IN_PROGRESS), _missao(2, MissionStatus.COMPLETED)],
        ]
        self.game_api.verificar_missao.side_effect = [HTTPStatusException(400), None]
        self.game_api.resgatar_missao.return_value = MissionClaim(mission_id=2, reward=10)

        relatorio = self.service.executar(CONTEXTO)

        self.assertIn(1, relatorio.falhas)
        self.assertEqual(relatorio.processadas, [2])
        self.game_api.resgatar_missao.assert_called_once_with(CONTEXTO, 2)

    def test_id_do_convite_comparado_como_texto(self) -> None:
        self.game_api.listar_missoes.return_value = [_missao("6", MissionStatus.IN_PROGRESS)]

        relatorio = self.service.executar(CONTEXTO)

        self.assertEqual(relatorio.ignoradas, ["6"])


if __name__ == "__main__":
    unittest.main()
