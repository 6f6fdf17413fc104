"""
Classe base para serviços.

Define funcionalidades comuns e padrões para todos os serviços.
"""

from __future__ import annotations

from abc import ABC
from datetime import datetime, timezone
from typing import Any, Callable, Optional


def agora_utc() -> datetime:
    """Relógio de parede em UTC, comparável aos timestamps do servidor."""
    return datetime.now(timezone.utc)


class BaseService(ABC):
    """
    Classe base abstrata para todos os serviços.

    Fornece logger e relógio injetáveis.
    """

    def __init__(self, logger: Optional[Any] = None, relogio: Optional[Callable[[], datetime]] = None):
        """
        Inicializa o serviço.

        Args:
            logger: Serviço de logging (opcional)
            relogio: Função que retorna o instante atual (padrão: UTC do sistema)
        """
        self._logger = logger or self._get_default_logger()
        self._relogio = relogio or agora_utc

    def _get_default_logger(self) -> Any:
        """Obtém logger padrão se nenhum foi fornecido."""
        from pawbot.infrastructure.logging import get_logger
        return get_logger()

    @property
    def logger(self) -> Any:
        """Acesso ao logger do serviço."""
        return self._logger

    def agora(self) -> datetime:
        return self._relogio()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
