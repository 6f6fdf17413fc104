"""
Classe base para clientes de API.

Executa requisições JSON com ``requests`` e traduz falhas HTTP para a
hierarquia de exceções do PawBot (conflito, transitória, autenticação,
falha dura).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from pawbot.config.constants import CONFLICT_MESSAGES, DEFAULT_HEADERS
from pawbot.config.models import ApiConfig
from pawbot.core.domain import RequestContext
from pawbot.core.exceptions import (
    AuthenticationException,
    ConflictException,
    HTTPStatusException,
    InvalidAPIResponseException,
    RequestException,
    RequestTimeoutException,
    TransientServerException,
    wrap_exception,
)


class BaseAPIClient:
    """Headers por conta, classificação de erros HTTP e leitura de ``data``."""

    def __init__(
        self,
        base_url: str,
        config: Optional[ApiConfig] = None,
        logger: Optional[Any] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.config = config or ApiConfig()
        self.timeout = self.config.timeout
        self._logger = logger or self._get_logger()
        self.session = session or requests.Session()

    def _get_logger(self) -> Any:
        from pawbot.infrastructure.logging import get_logger
        return get_logger()

    @property
    def logger(self) -> Any:
        return self._logger

    def build_headers(self, contexto: RequestContext) -> Dict[str, str]:
        """Monta os headers da requisição a partir do contexto."""
        headers = dict(DEFAULT_HEADERS)
        headers.update({
            "Origin": self.config.origin,
            "Referer": self.config.referer,
            "User-Agent": self.config.user_agent,
            "Authorization": contexto.token,
        })
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        contexto: RequestContext,
        *,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Executa requisição HTTP.

        Args:
            method: Método HTTP
            endpoint: Endpoint (concatenado com base_url)
            contexto: Contexto com o token da conta
            json: Corpo JSON
            params: Query parameters

        Returns:
            Any: JSON da resposta ou None

        Raises:
            RequestTimeoutException: Timeout
            RequestException: Erro de conexão/requisição
            HTTPStatusException: Status >= 400 (ou subclasse classificada)
            InvalidAPIResponseException: Corpo não é JSON
        """
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.request(
                method,
                url,
                headers=self.build_headers(contexto),
                json=json,
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            self.logger.debug(f"Timeout ao acessar {url}")
            raise RequestTimeoutException(
                f"Timeout ao acessar {url}",
                details={"url": url, "method": method},
                cause=e,
            ) from e
        except requests.exceptions.RequestException as e:
            self.logger.debug(f"Erro de requisição ao acessar {url}: {e}")
            raise wrap_exception(
                e, RequestException,
                f"Erro de requisição: {e}",
                url=url, method=method
            ) from e

        if response.status_code >= 400:
            erro = self._classificar_erro(response, url)
            self.logger.debug(f"{method} {endpoint} falhou: {erro}")
            raise erro

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise InvalidAPIResponseException(
                "Resposta não é JSON válido",
                details={"url": url, "status_code": response.status_code},
                cause=e,
            ) from e

    @staticmethod
    def _mensagem_servidor(response: requests.Response) -> Optional[str]:
        """Extrai o campo ``message`` do corpo de erro, se houver."""
        try:
            corpo = response.json()
        except ValueError:
            return None
        if isinstance(corpo, dict):
            mensagem = corpo.get("message")
            if mensagem is not None:
                return str(mensagem)
        return None

    def _classificar_erro(self, response: requests.Response, url: str) -> HTTPStatusException:
        """Converte uma resposta de erro na exceção adequada."""
        status = response.status_code
        mensagem = self._mensagem_servidor(response)

        if mensagem in CONFLICT_MESSAGES:
            return ConflictException(status, mensagem, url)
        if status in (401, 403):
            return AuthenticationException(status, mensagem, url)
        if status >= 500:
            return TransientServerException(status, mensagem, url)
        return HTTPStatusException(status, mensagem, url)

    @staticmethod
    def extrair(payload: Any, *chaves: str) -> Any:
        """
        Navega ``payload`` pelas chaves informadas.

        Raises:
            InvalidAPIResponseException: Se algum nível estiver ausente.
        """
        atual = payload
        for chave in chaves:
            if not isinstance(atual, dict) or chave not in atual:
                raise InvalidAPIResponseException(
                    "Formato de resposta inesperado",
                    details={"caminho": ".".join(chaves), "faltando": chave}
                )
            atual = atual[chave]
        return atual
