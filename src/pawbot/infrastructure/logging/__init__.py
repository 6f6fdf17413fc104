"""
Sistema de logging do PawBot.

Logger próprio com nível SUCCESS, id de processo para correlação e
handlers de console e arquivo.
"""

from typing import Optional

from pawbot.config.models import LoggerConfig
from .context import etapa_ativa, etapa_corrente, id_processo
from .formatters import ConsoleFormatter, FileFormatter, LogFormatter, LogRecord
from .handlers import ConsoleHandler, FileHandler, LogHandler
from .logger import PawLogger, ScopedLogger

_logger_instance: Optional[PawLogger] = None


def get_logger(config: Optional[LoggerConfig] = None) -> PawLogger:
    """
    Retorna o logger da aplicação.

    Com ``config`` o logger atual é fechado e recriado.
    """
    global _logger_instance
    if config is not None:
        if _logger_instance is not None:
            _logger_instance.close()
        _logger_instance = PawLogger(config)
    elif _logger_instance is None:
        _logger_instance = PawLogger()
    return _logger_instance


__all__ = [
    "ConsoleFormatter",
    "ConsoleHandler",
    "FileFormatter",
    "FileHandler",
    "LogFormatter",
    "LogHandler",
    "LogRecord",
    "LoggerConfig",
    "PawLogger",
    "ScopedLogger",
    "etapa_ativa",
    "etapa_corrente",
    "get_logger",
    "id_processo",
]
