"""Contrato para a origem da credencial."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ICredentialRepository(ABC):
    """Fornece o token bearer da conta."""

    @abstractmethod
    def carregar(self) -> str:
        """Lê o token; falha se estiver ausente ou vazio."""
