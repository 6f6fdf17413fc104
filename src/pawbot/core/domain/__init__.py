"""Domain entities for the PawBot project."""

from pawbot.core.domain.context import RequestContext
from pawbot.core.domain.player import PlayerState, parse_timestamp
from pawbot.core.domain.mission import Mission, MissionStatus
from pawbot.core.domain.execution import (
    AcaoResultado,
    ClaimResult,
    CycleResult,
    EtapaResult,
    LeaderboardEntry,
    MissionClaim,
    MissionReport,
    PlanoAcumulacao,
    ProgressaoResult,
)

__all__ = [
    "RequestContext",
    "PlayerState",
    "parse_timestamp",
    "Mission",
    "MissionStatus",
    "AcaoResultado",
    "ClaimResult",
    "CycleResult",
    "EtapaResult",
    "LeaderboardEntry",
    "MissionClaim",
    "MissionReport",
    "PlanoAcumulacao",
    "ProgressaoResult",
]
