"""Interfaces de repositórios."""

from .ICredentialRepository import ICredentialRepository

__all__ = ["ICredentialRepository"]
