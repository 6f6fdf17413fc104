"""Repositórios de dados locais."""

from .credential_repository import FileCredentialRepository

__all__ = ["FileCredentialRepository"]
