"""
Exceções do PawBot.

A camada HTTP classifica cada falha uma única vez; os serviços decidem
o que fazer pela classe: conflito e falha transitória são tratados no
lugar, o resto propaga até o supervisor.
"""

from __future__ import annotations

from typing import Any, Optional


class PawBotBaseException(Exception):
    """Raiz da hierarquia; ``details`` e ``cause`` aparecem em ``str()``."""

    def __init__(self, message: str, *, details: Optional[dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base = f"{base} ({details_str})"
        if self.cause:
            base = f"{base} | Causa: {self.cause}"
        return base

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, details={self.details!r})"


# ==================== Exceções de Rede ====================

class NetworkException(PawBotBaseException):
    """Falha de transporte ou resposta HTTP de erro."""


class RequestException(NetworkException):
    """A requisição não completou (conexão, DNS, protocolo)."""


class RequestTimeoutException(RequestException):
    """O servidor não respondeu dentro do timeout configurado."""


class HTTPStatusException(RequestException):
    """Servidor respondeu com status HTTP de erro."""

    def __init__(
        self,
        status_code: int,
        server_message: Optional[str] = None,
        url: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.server_message = server_message
        self.url = url
        details: dict[str, Any] = {"status_code": status_code}
        if server_message:
            details["server_message"] = server_message
        if url:
            details["url"] = url
        super().__init__(f"Erro HTTP {status_code}", details=details, cause=cause)


class ConflictException(HTTPStatusException):
    """Servidor informa que a ação pedida já está satisfeita (sessão ou upgrade em andamento)."""


class TransientServerException(HTTPStatusException):
    """Falha temporária do servidor (5xx)."""


# ==================== Exceções de Autenticação ====================

class AuthenticationException(HTTPStatusException):
    """Token recusado pelo servidor (401/403)."""


class AccountNotFoundException(HTTPStatusException):
    """Conta de jogo inexistente para a carteira informada (404 no login)."""


# ==================== Exceções de API ====================

class APIException(PawBotBaseException):
    """Exceção base para erros de API."""


class InvalidAPIResponseException(APIException):
    """Resposta de API inválida ou inesperada."""


# ==================== Exceções de Configuração ====================

class ConfigurationException(PawBotBaseException):
    """Configuração ou credencial inutilizável."""


class InvalidConfigException(ConfigurationException):
    """Configuração inválida."""


class MissingConfigException(ConfigurationException):
    """Arquivo de configuração informado explicitamente não existe."""


class CredentialException(ConfigurationException):
    """Credencial ausente ou ilegível."""


# ==================== Helpers ====================

def wrap_exception(exc: Exception, wrapper_class: type[PawBotBaseException], message: str, **details: Any) -> PawBotBaseException:
    """Converte ``exc`` em ``wrapper_class`` preservando a causa."""
    return wrapper_class(message, details=details, cause=exc)


__all__ = [
    # Base
    "PawBotBaseException",
    # Network
    "NetworkException",
    "RequestException",
    "RequestTimeoutException",
    "HTTPStatusException",
    "ConflictException",
    "TransientServerException",
    # Authentication
    "AuthenticationException",
    "AccountNotFoundException",
    # API
    "APIException",
    "InvalidAPIResponseException",
    # Configuration
    "ConfigurationException",
    "InvalidConfigException",
    "MissingConfigException",
    "CredentialException",
    # Helpers
    "wrap_exception",
]
