"""
Supervisor de resiliência.

Máquina de dois estados que mantém o agente rodando sem intervenção:
AUTENTICANDO carrega a credencial e faz login; EXECUTANDO roda ciclos.
Nenhum erro encerra o laço.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Any, Callable, Optional

from pawbot.config.models import SupervisorConfig
from pawbot.core.domain import RequestContext
from pawbot.core.exceptions import AuthenticationException
from pawbot.interfaces.repositories import ICredentialRepository
from .auth_service import AuthService
from .base_service import BaseService
from .cycle_service import CycleService


class EstadoSupervisor(str, Enum):
    AUTENTICANDO = "autenticando"
    EXECUTANDO = "executando"


class Supervisor(BaseService):
    """Alterna entre autenticação e ciclos, esperando após cada falha."""

    def __init__(
        self,
        credenciais: ICredentialRepository,
        auth: AuthService,
        ciclo: CycleService,
        config: Optional[SupervisorConfig] = None,
        logger: Optional[Any] = None,
        dormir: Callable[[float], None] = time.sleep,
    ):
        super().__init__(logger)
        self.credenciais = credenciais
        self.auth = auth
        self.ciclo = ciclo
        self.config = config or SupervisorConfig()
        self._dormir = dormir

        self.estado = EstadoSupervisor.AUTENTICANDO
        self.contexto: Optional[RequestContext] = None

    def _esperar(self) -> None:
        atraso = self.config.retry_delay
        self.logger.aviso(f"Tentando novamente em {atraso / 60:g} minutos...")
        self._dormir(atraso)

    def _autenticar(self) -> None:
        token = self.credenciais.carregar()
        self.contexto = self.auth.autenticar(RequestContext(token=token))
        self.estado = EstadoSupervisor.EXECUTANDO

    def passo(self) -> EstadoSupervisor:
        """Executa uma transição e retorna o novo estado."""
        if self.estado is EstadoSupervisor.AUTENTICANDO:
            try:
                self._autenticar()
            except Exception as e:
                self.logger.erro(f"Falha ao iniciar: {e}", exception=e)
                self._esperar()
            return self.estado

        try:
            resultado = self.ciclo.executar(self.contexto)
            self.logger.debug("Ciclo concluído", **resultado.get_resumo())
        except AuthenticationException as e:
            self.logger.erro(f"Credencial recusada, reautenticando: {e}", exc_info=False)
            self.estado = EstadoSupervisor.AUTENTICANDO
            self.contexto = None
            self._esperar()
        except Exception as e:
            # o traceback já saiu no log da etapa
            self.logger.erro(f"Ciclo falhou: {e}", exc_info=False)
            self._esperar()
        return self.estado

    def executar(self, limite_iteracoes: Optional[int] = None) -> None:
        """
        Roda o laço supervisionado.

        Args:
            limite_iteracoes: Número máximo de transições (None = infinito)
        """
        iteracao = 0
        while limite_iteracoes is None or iteracao < limite_iteracoes:
            self.passo()
            iteracao += 1
