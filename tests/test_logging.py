"""Testes do logger."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from pawbot.config.models import LoggerConfig
from pawbot.infrastructure.logging import (
    ConsoleFormatter,
    ConsoleHandler,
    FileFormatter,
    FileHandler,
    PawLogger,
)
from pawbot.infrastructure.logging.logger import _NiveisMixin


class TestPawLogger(unittest.TestCase):

    def setUp(self) -> None:
        self.stream = io.StringIO()
        handler = ConsoleHandler(
            stream=self.stream,
            formatter=ConsoleFormatter(use_colors=False, show_time=False),
            level=20,
        )
        self.logger = PawLogger(LoggerConfig(), handlers=[handler])

    def test_nivel_sucesso(self) -> None:
        self.logger.sucesso("Ouro resgatado")

        self.assertIn("SUCCESS", self.stream.getvalue())
        self.assertIn("Ouro resgatado", self.stream.getvalue())

    def test_filtra_abaixo_do_nivel(self) -> None:
        self.logger.debug("detalhe")

        self.assertEqual(self.stream.getvalue(), "")

    def test_contexto_adicional(self) -> None:
        self.logger.com_contexto(missao=6).aviso("Missão ignorada")

        saida = self.stream.getvalue()
        self.assertIn("WARNING", saida)
        self.assertIn("missao=6", saida)

    def test_etapa_registra_falha_e_propaga(self) -> None:
        with self.assertRaises(ValueError):
            with self.logger.etapa("Missões"):
                raise ValueError("falhou")

        self.assertIn("Falha: Missões", self.stream.getvalue())

    def test_etapa_com_mensagem_de_sucesso(self) -> None:
        with self.logger.etapa("Acumulação", mensagem_sucesso="Bolsa resgatada"):
            pass

        self.assertIn("Bolsa resgatada", self.stream.getvalue())

    def test_set_level(self) -> None:
        self.logger.set_level("ERROR")
        self.logger.info("oculto")

        self.assertEqual(self.stream.getvalue(), "")


class TestContratoDoLogger(unittest.TestCase):

    def test_subclasse_sem_emitir_nao_instancia(self) -> None:
        class SemEmitir(_NiveisMixin):
            pass

        with self.assertRaises(TypeError):
            SemEmitir()


class TestFileHandler(unittest.TestCase):

    def test_escreve_com_traceback(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            arquivo = Path(tmp) / "pawbot.log"
            handler = FileHandler(filename=arquivo, formatter=FileFormatter(), level=10)
            logger = PawLogger(LoggerConfig(), handlers=[handler])

            try:
                raise RuntimeError("quebrou")
            except RuntimeError as e:
                logger.erro("Ciclo falhou", exception=e)
            logger.close()

            conteudo = arquivo.read_text(encoding="utf-8")

        self.assertIn("ERROR", conteudo)
        self.assertIn("Ciclo falhou", conteudo)
        self.assertIn("RuntimeError: quebrou", conteudo)


if __name__ == "__main__":
    unittest.main()
