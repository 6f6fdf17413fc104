"""Interface de console (Rich)."""

from .banner import print_banner
from .console import get_console, pawbot_theme, print_error, print_warning
from .countdown import Countdown, formatar_tempo
from .tables import print_missions, print_player_state, print_wait_plan

__all__ = [
    "Countdown",
    "formatar_tempo",
    "get_console",
    "pawbot_theme",
    "print_banner",
    "print_error",
    "print_missions",
    "print_player_state",
    "print_wait_plan",
    "print_warning",
]
