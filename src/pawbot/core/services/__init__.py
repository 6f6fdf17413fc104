"""Serviços de domínio do agente."""

from .accumulation_service import AccumulationService, calcular_espera
from .auth_service import AuthService
from .base_service import BaseService, agora_utc
from .cycle_service import CycleService
from .mission_service import MissionService
from .progression_service import ProgressionService
from .supervisor_service import EstadoSupervisor, Supervisor

__all__ = [
    "AccumulationService",
    "AuthService",
    "BaseService",
    "CycleService",
    "EstadoSupervisor",
    "MissionService",
    "ProgressionService",
    "Supervisor",
    "agora_utc",
    "calcular_espera",
]
