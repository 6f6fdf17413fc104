"""Interfaces relacionadas a serviços."""

from .ILoggingService import ILoggingService
from .IGameAPIService import IGameAPIService
from .IWalletAPIService import IWalletAPIService

__all__ = [
    "ILoggingService",
    "IGameAPIService",
    "IWalletAPIService",
]
