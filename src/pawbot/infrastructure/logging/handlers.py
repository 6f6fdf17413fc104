"""Destinos dos registros de log: console e arquivo."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO

from .formatters import ConsoleFormatter, FileFormatter, LogFormatter, LogRecord


class LogHandler(ABC):
    """Filtra por nível e escreve o registro formatado."""

    def __init__(self, formatter: LogFormatter, level: int = 0):
        self.formatter = formatter
        self.level = level

    def handle(self, record: LogRecord) -> None:
        if record.nivel < self.level:
            return
        try:
            self.write(self.formatter.format(record))
        except (OSError, ValueError) as e:
            # O log nunca derruba o agente
            print(f"Falha ao escrever log: {e}", file=sys.stderr)

    @abstractmethod
    def write(self, texto: str) -> None:
        ...

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.flush()


class ConsoleHandler(LogHandler):
    def __init__(self, stream: Optional[TextIO] = None, formatter: Optional[LogFormatter] = None,
                 level: int = 0, use_stderr: bool = False):
        super().__init__(formatter or ConsoleFormatter(), level)
        self._stream = stream
        self._use_stderr = use_stderr

    @property
    def stream(self) -> TextIO:
        # Resolvido a cada escrita para acompanhar redirecionamentos de stdout
        if self._stream is not None:
            return self._stream
        return sys.stderr if self._use_stderr else sys.stdout

    def write(self, texto: str) -> None:
        self.stream.write(texto + "\n")
        self.stream.flush()

    def flush(self) -> None:
        self.stream.flush()


class FileHandler(LogHandler):
    def __init__(self, filename: str | Path, formatter: Optional[LogFormatter] = None,
                 level: int = 0, mode: str = "a", encoding: str = "utf-8"):
        super().__init__(formatter or FileFormatter(), level)
        self.filename = Path(filename)
        self.filename.parent.mkdir(parents=True, exist_ok=True)
        self._file: Optional[TextIO] = self.filename.open(mode, encoding=encoding)

    def write(self, texto: str) -> None:
        if self._file is None:
            return
        self._file.write(texto + "\n")
        self._file.flush()

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
