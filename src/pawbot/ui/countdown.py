"""
Contagem regressiva desenhada no lugar.

Usa ``rich.live.Live`` para reescrever a mesma linha a cada segundo.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.live import Live
from rich.text import Text

from .console import get_console


def formatar_tempo(segundos: int) -> str:
    """Formata segundos como ``M:SS``."""
    segundos = max(int(segundos), 0)
    minutos, resto = divmod(segundos, 60)
    return f"{minutos}:{resto:02d}"


class Countdown:
    """Linha de contagem regressiva do tempo de mineração."""

    def __init__(self, console: Optional[Console] = None, rotulo: str = "Tempo de mineração restante"):
        self.console = console or get_console()
        self.rotulo = rotulo
        self._live: Optional[Live] = None

    def _render(self, segundos: int) -> Text:
        texto = Text()
        texto.append(f"{self.rotulo}: ", style="cyan")
        texto.append(formatar_tempo(segundos), style="gold")
        return texto

    def iniciar(self, segundos: int) -> None:
        self.finalizar()
        self._live = Live(
            self._render(segundos),
            console=self.console,
            auto_refresh=False,
            transient=True,
        )
        self._live.start(refresh=True)

    def atualizar(self, restante: int) -> None:
        if self._live is None:
            return
        self._live.update(self._render(restante), refresh=True)

    def finalizar(self) -> None:
        if self._live is None:
            return
        self._live.stop()
        self._live = None
