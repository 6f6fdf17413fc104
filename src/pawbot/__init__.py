"""
PawBot - Automação do Robot Cat na PawWallet

Organização:
- core/domain: Entidades (RequestContext, PlayerState, Mission, resultados)
- core/services: Sequenciador, missões, acumulação, ciclo e supervisor
- core/exceptions: Hierarquia de exceções
- adapters/api: Clientes HTTP da carteira e do jogo
- adapters/repositories: Credencial em arquivo
- infrastructure: Logging
"""

from pawbot.core.domain import (
    Mission,
    MissionStatus,
    PlayerState,
    RequestContext,
    CycleResult,
)

from pawbot.core.exceptions import (
    PawBotBaseException,
    AuthenticationException,
    ConflictException,
    TransientServerException,
)

__version__ = "1.0.0"

__all__ = [
    # Domain
    "Mission",
    "MissionStatus",
    "PlayerState",
    "RequestContext",
    "CycleResult",
    # Exceptions
    "PawBotBaseException",
    "AuthenticationException",
    "ConflictException",
    "TransientServerException",
]
