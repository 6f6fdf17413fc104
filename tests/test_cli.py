"""Testes da CLI."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from pawbot.cli import app
from pawbot.config.models import AppConfig
from pawbot.core.domain import PlanoAcumulacao, RequestContext
from pawbot.core.exceptions import CredentialException


class TestCli(unittest.TestCase):

    def setUp(self) -> None:
        self.runner = CliRunner()
        self.container = MagicMock()
        self.container.credential_repository.return_value.carregar.return_value = "tok"
        self.container.auth_service.return_value.autenticar.return_value = RequestContext(
            token="tok", wallet_address="0xabc", user_id="1", username="gato"
        )
        patcher_config = patch("pawbot.cli.get_config", return_value=AppConfig())
        patcher_container = patch("pawbot.cli.ApplicationContainer", return_value=self.container)
        patcher_config.start()
        patcher_container.start()
        self.addCleanup(patcher_config.stop)
        self.addCleanup(patcher_container.stop)

    def test_wait_time(self) -> None:
        self.container.accumulation_service.return_value.planejar.return_value = PlanoAcumulacao(
            segundos=90, ouro_atual=10.0, capacidade=100.0
        )

        resultado = self.runner.invoke(app, ["wait-time"])

        self.assertEqual(resultado.exit_code, 0, resultado.output)
        self.assertIn("1:30", resultado.output)

    def test_credencial_ausente_sai_com_erro(self) -> None:
        self.container.credential_repository.return_value.carregar.side_effect = CredentialException("ausente")

        resultado = self.runner.invoke(app, ["status"])

        self.assertEqual(resultado.exit_code, 1)

    def test_run_interrompido_pelo_usuario(self) -> None:
        self.container.config.return_value = AppConfig()
        self.container.supervisor.return_value.executar.side_effect = KeyboardInterrupt

        resultado = self.runner.invoke(app, ["run"])

        self.assertEqual(resultado.exit_code, 0, resultado.output)
        self.container.logger.return_value.close.assert_called_once()

    def test_opcoes_de_debug_e_credencial(self) -> None:
        config = AppConfig()
        with patch("pawbot.cli.get_config", return_value=config):
            self.container.accumulation_service.return_value.planejar.return_value = PlanoAcumulacao(
                segundos=5, ouro_atual=0.0, capacidade=10.0
            )
            resultado = self.runner.invoke(app, ["wait-time", "--debug", "--credentials", "token.txt"])

        self.assertEqual(resultado.exit_code, 0, resultado.output)
        self.assertTrue(config.debug)
        self.assertEqual(config.logging.nivel_minimo, "DEBUG")
        self.assertEqual(str(config.supervisor.credentials_file), "token.txt")


if __name__ == "__main__":
    unittest.main()
