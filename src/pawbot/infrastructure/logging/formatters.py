"""
Formatadores de registros de log.

Console: uma linha colorida por evento. Arquivo: texto plano com
origem, id do processo e traceback completo.
"""

from __future__ import annotations

import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from pawbot.config.constants import LEVEL_NAMES


@dataclass
class LogRecord:
    """Evento de log já resolvido pelo logger."""
    nivel: int
    mensagem: str
    instante: datetime
    processo: str
    etapa: str = ""
    origem: Dict[str, Any] = field(default_factory=dict)
    dados: Dict[str, Any] = field(default_factory=dict)
    excecao: Optional[BaseException] = None

    @property
    def nome_nivel(self) -> str:
        return LEVEL_NAMES.get(self.nivel, "UNKNOWN")


def _dados_compactos(dados: Dict[str, Any], limite: int = 60) -> str:
    pares = []
    for chave, valor in dados.items():
        if chave.startswith("_"):
            continue
        texto = repr(valor)
        if len(texto) > limite:
            texto = texto[:limite - 3] + "..."
        pares.append(f"{chave}={texto}")
    return ", ".join(pares)


def _traceback(excecao: BaseException) -> str:
    return "".join(traceback.format_exception(type(excecao), excecao, excecao.__traceback__)).rstrip()


class LogFormatter(ABC):
    """Converte um :class:`LogRecord` em texto."""

    @abstractmethod
    def format(self, record: LogRecord) -> str:
        ...


class ConsoleFormatter(LogFormatter):
    """Linha única para terminal, com cor ANSI opcional."""

    ESTILOS = {
        10: ("\033[90m", "·"),
        20: ("\033[36m", "i"),
        25: ("\033[32m", "✔"),
        30: ("\033[33m", "!"),
        40: ("\033[31m", "✖"),
        50: ("\033[1;35m", "‼"),
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True, show_time: bool = True, show_traceback: bool = False):
        self.use_colors = use_colors
        self.show_time = show_time
        self.show_traceback = show_traceback

    def format(self, record: LogRecord) -> str:
        cor, simbolo = self.ESTILOS.get(record.nivel, ("", "-"))
        cabecalho = f"{simbolo} {record.nome_nivel:<8}"
        if self.use_colors:
            cabecalho = f"{cor}{cabecalho}{self.RESET}"
        if self.show_time:
            cabecalho = f"{record.instante:%H:%M:%S} {cabecalho}"

        linha = f"{cabecalho} | {record.mensagem}"
        extras = _dados_compactos(record.dados)
        if extras:
            linha += f" | {extras}"

        if record.excecao is not None and self.show_traceback:
            linha += "\n" + _traceback(record.excecao)
        return linha


class FileFormatter(LogFormatter):
    """Texto plano para arquivo, sempre com traceback."""

    def format(self, record: LogRecord) -> str:
        partes = [
            record.instante.isoformat(timespec="milliseconds"),
            f"{record.nome_nivel:<8}",
            f"[{record.processo}]",
        ]
        if record.etapa:
            partes.append(f"({record.etapa})")
        if record.origem:
            partes.append(f"{record.origem['arquivo']}:{record.origem['linha']}")

        linha = " ".join(partes) + f" | {record.mensagem}"
        extras = _dados_compactos(record.dados, limite=200)
        if extras:
            linha += f" | {extras}"

        if record.excecao is not None:
            linha += "\n" + _traceback(record.excecao)
        return linha
