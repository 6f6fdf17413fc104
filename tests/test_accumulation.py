"""Testes do agendador de acumulação."""

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from pawbot.core.domain import ClaimResult, LeaderboardEntry, PlayerState, RequestContext
from pawbot.core.exceptions import InvalidAPIResponseException
from pawbot.core.services import AccumulationService, calcular_espera

AGORA = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def _estado(**overrides) -> PlayerState:
    dados = dict(
        level=1,
        mining_speed=0.5,
        bag_cap=1000.0,
        hearts=5,
        unclaimed_gold=100.0,
        last_accumulate_time=AGORA - timedelta(seconds=200),
    )
    dados.update(overrides)
    return PlayerState(**dados)


class FakeClock:
    """Relógio monotônico que só avança quando ``dormir`` é chamado."""

    def __init__(self, inicio: float = 1000.0):
        self.agora = inicio
        self.sonos = []

    def monotonic(self) -> float:
        return self.agora

    def dormir(self, segundos: float) -> None:
        self.sonos.append(segundos)
        self.agora += segundos


class TestCalcularEspera(unittest.TestCase):

    def test_exemplo_bolsa_parcial(self) -> None:
        plano = calcular_espera(_estado(), AGORA)

        self.assertEqual(plano.segundos, 1600)
        self.assertAlmostEqual(plano.ouro_atual, 200.0)
        self.assertEqual(plano.capacidade, 1000.0)
        self.assertEqual(plano.minutos, 26)

    def test_bolsa_cheia_espera_minima(self) -> None:
        estado = _estado(last_accumulate_time=AGORA - timedelta(hours=10))
        self.assertEqual(calcular_espera(estado, AGORA).segundos, 1)

    def test_fracao_arredonda_para_cima(self) -> None:
        estado = _estado(bag_cap=100.0, unclaimed_gold=99.9, last_accumulate_time=AGORA, mining_speed=1.0)
        self.assertEqual(calcular_espera(estado, AGORA).segundos, 1)

        estado = _estado(bag_cap=100.0, unclaimed_gold=97.5, last_accumulate_time=AGORA, mining_speed=1.0)
        self.assertEqual(calcular_espera(estado, AGORA).segundos, 3)

    def test_sem_ultimo_acumulo_usa_ouro_nao_resgatado(self) -> None:
        estado = _estado(last_accumulate_time=None, unclaimed_gold=0.0)
        self.assertEqual(calcular_espera(estado, AGORA).segundos, 2000)

    def test_velocidade_invalida(self) -> None:
        with self.assertRaises(InvalidAPIResponseException):
            calcular_espera(_estado(mining_speed=0.0), AGORA)


class TestAguardar(unittest.TestCase):

    def setUp(self) -> None:
        self.clock = FakeClock()
        self.contagem = MagicMock()
        self.service = AccumulationService(
            game_api=MagicMock(),
            logger=MagicMock(),
            contagem=self.contagem,
            monotonic=self.clock.monotonic,
            dormir=self.clock.dormir,
        )

    def test_contagem_a_cada_segundo(self) -> None:
        self.service.aguardar(3)

        self.contagem.iniciar.assert_called_once_with(3)
        self.assertEqual(
            [c.args[0] for c in self.contagem.atualizar.call_args_list],
            [2, 1],
        )
        self.contagem.finalizar.assert_called_once()
        self.assertEqual(self.clock.sonos, [1, 1, 1])
        self.assertEqual(self.clock.agora, 1003.0)

    def test_compensa_atraso_do_tick(self) -> None:
        pedidos = []

        def dormir_com_atraso(segundos: float) -> None:
            pedidos.append(segundos)
            self.clock.dormir(segundos + 0.25)

        self.service._dormir = dormir_com_atraso
        self.service.aguardar(3)

        self.assertEqual(pedidos, [1, 0.75, 0.75])
        self.assertEqual([c.args[0] for c in self.contagem.atualizar.call_args_list], [2, 1])
        self.assertGreaterEqual(self.clock.agora, 1003.0)

    def test_espera_minima(self) -> None:
        self.service.aguardar(1)

        self.contagem.atualizar.assert_not_called()
        self.assertEqual(self.clock.sonos, [1])


class TestResgatarEReportar(unittest.TestCase):

    def test_resgate_e_ranking(self) -> None:
        game_api = MagicMock()
        game_api.resgatar_ouro.return_value = ClaimResult(claimed_gold=500.0, balance=1500.0)
        game_api.obter_ranking.return_value = LeaderboardEntry(position=42, total_gold=9000.0)
        service = AccumulationService(game_api=game_api, logger=MagicMock())
        contexto = RequestContext(token="tok")

        resgate, ranking = service.resgatar_e_reportar(contexto)

        self.assertEqual(resgate.claimed_gold, 500.0)
        self.assertEqual(ranking.position, 42)
        game_api.resgatar_ouro.assert_called_once_with(contexto)
        game_api.obter_ranking.assert_called_once_with(contexto)

    def test_planejar_usa_estado_do_servidor(self) -> None:
        game_api = MagicMock()
        game_api.obter_estado.return_value = _estado()
        service = AccumulationService(game_api=game_api, logger=MagicMock(), relogio=lambda: AGORA)

        plano = service.planejar(RequestContext(token="tok"))

        self.assertEqual(plano.segundos, 1600)


if __name__ == "__main__":
    unittest.main()
