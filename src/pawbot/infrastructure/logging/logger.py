"""
Logger principal do PawBot.

``PawLogger`` monta um :class:`LogRecord` por chamada e repassa aos
handlers; ``ScopedLogger`` acrescenta dados fixos e delega ao pai.
"""

from __future__ import annotations

import sys
from abc import abstractmethod
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from pawbot.config.constants import LEVEL_VALUES
from pawbot.config.models import LoggerConfig
from pawbot.core.exceptions import InvalidConfigException
from pawbot.interfaces.services import ILoggingService

from .context import etapa_ativa, etapa_corrente, id_processo, origem
from .formatters import ConsoleFormatter, FileFormatter, LogRecord
from .handlers import ConsoleHandler, FileHandler, LogHandler


class _NiveisMixin(ILoggingService):
    """Métodos por nível; subclasses implementam ``_emitir``."""

    @abstractmethod
    def _emitir(self, nivel: str, mensagem: str, dados: Dict[str, Any], profundidade: int) -> None:
        ...

    def debug(self, mensagem: str, **dados: Any) -> None:
        self._emitir("DEBUG", mensagem, dados, 2)

    def info(self, mensagem: str, **dados: Any) -> None:
        self._emitir("INFO", mensagem, dados, 2)

    def sucesso(self, mensagem: str, **dados: Any) -> None:
        self._emitir("SUCCESS", mensagem, dados, 2)

    def aviso(self, mensagem: str, **dados: Any) -> None:
        self._emitir("WARNING", mensagem, dados, 2)

    def erro(self, mensagem: str, **dados: Any) -> None:
        dados.setdefault("exc_info", True)
        self._emitir("ERROR", mensagem, dados, 2)

    def critico(self, mensagem: str, **dados: Any) -> None:
        dados.setdefault("exc_info", True)
        self._emitir("CRITICAL", mensagem, dados, 2)

    def com_contexto(self, **dados: Any) -> ILoggingService:
        return ScopedLogger(self, dados)

    @contextmanager
    def etapa(self, titulo: str, **dados: Any) -> Iterator[None]:
        """
        Agrupa os registros de um bloco sob ``titulo``.

        Args:
            titulo: Nome da etapa
            mensagem_inicial: Registrada em DEBUG na entrada
            mensagem_sucesso: Registrada em SUCCESS na saída, se informada
            mensagem_falha: Prefixo do erro registrado antes de propagar
        """
        inicio = dados.pop("mensagem_inicial", f"Iniciando: {titulo}")
        sucesso = dados.pop("mensagem_sucesso", None)
        falha = dados.pop("mensagem_falha", f"Falha: {titulo}")

        with etapa_ativa(titulo):
            self.debug(inicio, **dados)
            try:
                yield
            except Exception as e:
                self.erro(f"{falha}: {e}", exception=e, **dados)
                raise
            if sucesso:
                self.sucesso(sucesso, **dados)


class PawLogger(_NiveisMixin):
    """Logger da aplicação: filtra por nível e distribui aos handlers."""

    def __init__(self, config: Optional[LoggerConfig] = None, handlers: Optional[List[LogHandler]] = None):
        """
        Args:
            config: Configuração do logger
            handlers: Handlers prontos; se omitido, são criados a partir da configuração
        """
        self.config = config or LoggerConfig()
        self.config.validate()
        self.handlers: List[LogHandler] = list(handlers) if handlers is not None else self._handlers_padrao()

    def _handlers_padrao(self) -> List[LogHandler]:
        nivel = LEVEL_VALUES[self.config.nivel_minimo]
        handlers: List[LogHandler] = [
            ConsoleHandler(
                formatter=ConsoleFormatter(
                    use_colors=self.config.usar_cores,
                    show_time=self.config.mostrar_tempo,
                    show_traceback=nivel <= LEVEL_VALUES["DEBUG"],
                ),
                level=nivel,
            )
        ]
        if self.config.arquivo_log:
            handlers.append(FileHandler(
                self.config.arquivo_log,
                level=nivel,
                mode="w" if self.config.sobrescrever_arquivo else "a",
            ))
        return handlers

    def _emitir(self, nivel: str, mensagem: str, dados: Dict[str, Any], profundidade: int) -> None:
        excecao = dados.pop("exception", None)
        if dados.pop("exc_info", False) and excecao is None:
            excecao = sys.exc_info()[1]

        record = LogRecord(
            nivel=LEVEL_VALUES[nivel],
            mensagem=mensagem,
            instante=datetime.now(),
            processo=id_processo(),
            etapa=etapa_corrente(),
            origem=origem(profundidade + 1),
            dados=dados,
            excecao=excecao,
        )
        for handler in self.handlers:
            handler.handle(record)

    def flush(self) -> None:
        for handler in self.handlers:
            handler.flush()

    def close(self) -> None:
        for handler in self.handlers:
            handler.close()
        self.handlers.clear()

    def set_level(self, level: str) -> None:
        """
        Altera o nível mínimo de todos os handlers.

        Raises:
            InvalidConfigException: Se o nível não existir.
        """
        nome = level.upper()
        if nome not in LEVEL_VALUES:
            raise InvalidConfigException(f"Nível inválido: {level}", details={"level": level})

        self.config.nivel_minimo = nome
        valor = LEVEL_VALUES[nome]
        for handler in self.handlers:
            handler.level = valor
            if isinstance(handler.formatter, ConsoleFormatter):
                handler.formatter.show_traceback = valor <= LEVEL_VALUES["DEBUG"]


class ScopedLogger(_NiveisMixin):
    """Logger derivado com dados fixos (ex.: id da missão)."""

    def __init__(self, parent: _NiveisMixin, context: Dict[str, Any]):
        self.parent = parent
        self.context = context

    def _emitir(self, nivel: str, mensagem: str, dados: Dict[str, Any], profundidade: int) -> None:
        self.parent._emitir(nivel, mensagem, {**self.context, **dados}, profundidade + 1)
