"""Contrato para a API HTTP da carteira."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from pawbot.core.domain import RequestContext


class IWalletAPIService(ABC):
    """Operações da carteira usadas pela automação."""

    @abstractmethod
    def criar_carteira(self, contexto: "RequestContext") -> str:
        """Cria a carteira e retorna o endereço obtido no login da carteira."""

    @abstractmethod
    def contar_indicacoes(self, contexto: "RequestContext") -> int:
        """Retorna o total de amigos indicados."""
