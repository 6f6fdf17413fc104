"""Interfaces públicas utilizadas pelo container de injeção."""

from .services import ILoggingService, IGameAPIService, IWalletAPIService
from .repositories import ICredentialRepository

__all__ = [
    "ICredentialRepository",
    "IGameAPIService",
    "ILoggingService",
    "IWalletAPIService",
]
