"""Clientes HTTP das APIs da carteira e do jogo."""

from .base_api import BaseAPIClient
from .game_api import GameAPI
from .wallet_api import WalletAPI

__all__ = ["BaseAPIClient", "GameAPI", "WalletAPI"]
