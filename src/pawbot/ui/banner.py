"""Banner exibido na inicialização."""

from typing import Optional

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .console import get_console


def print_banner(app_name: str, version: str, console: Optional[Console] = None) -> None:
    console = console or get_console()

    texto = Text(justify="center")
    texto.append(f"{app_name}\n", style="bold magenta")
    texto.append("Automação do Robot Cat na PawWallet\n", style="cyan")
    texto.append(f"v{version}", style="dim")

    console.print(Panel(Align.center(texto), border_style="magenta", expand=False))
