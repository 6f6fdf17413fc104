"""Console Rich compartilhado pelos comandos e pela contagem regressiva."""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

pawbot_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "highlight": "magenta",
    "gold": "bold yellow",
})

_console = Console(theme=pawbot_theme)


def get_console() -> Console:
    return _console


def _aviso_marcado(estilo: str, marca: str, message: str) -> None:
    # mensagens podem trazer texto do servidor
    _console.print(f"[{estilo}]{marca} {escape(message)}[/{estilo}]")


def print_warning(message: str) -> None:
    _aviso_marcado("warning", "⚠", message)


def print_error(message: str) -> None:
    _aviso_marcado("error", "✖", message)
