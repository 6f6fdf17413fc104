"""Contrato do logger usado pelos serviços e adaptadores."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any


class ILoggingService(ABC):
    """
    Logger com nível de sucesso e dados estruturados.

    ``dados`` vira pares chave=valor no registro; ``exception`` e
    ``exc_info`` são reservados para anexar a exceção.
    """

    @abstractmethod
    def debug(self, mensagem: str, **dados: Any) -> None: ...

    @abstractmethod
    def info(self, mensagem: str, **dados: Any) -> None: ...

    @abstractmethod
    def sucesso(self, mensagem: str, **dados: Any) -> None: ...

    @abstractmethod
    def aviso(self, mensagem: str, **dados: Any) -> None: ...

    @abstractmethod
    def erro(self, mensagem: str, **dados: Any) -> None:
        """Anexa a exceção em tratamento, salvo ``exc_info=False``."""

    @abstractmethod
    def critico(self, mensagem: str, **dados: Any) -> None: ...

    @abstractmethod
    def com_contexto(self, **dados: Any) -> "ILoggingService":
        """Logger derivado que inclui ``dados`` em todo registro."""

    @abstractmethod
    def etapa(self, titulo: str, **dados: Any) -> AbstractContextManager[None]:
        """Agrupa os registros de um bloco; falhas são registradas e propagadas."""
