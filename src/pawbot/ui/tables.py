"""Tabelas Rich para os comandos de consulta."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pawbot.config.constants import CURRENCY
from pawbot.core.domain import Mission, MissionStatus, PlanoAcumulacao, PlayerState
from .console import get_console
from .countdown import formatar_tempo

_STATUS_STYLE = {
    MissionStatus.NOT_STARTED: "dim",
    MissionStatus.IN_PROGRESS: "cyan",
    MissionStatus.COMPLETED: "success",
    MissionStatus.CLAIMED: "magenta",
    MissionStatus.UNKNOWN: "warning",
}


def create_table(title: str, columns: List[str]) -> Table:
    """Cria uma tabela padronizada."""
    table = Table(title=title, box=box.ROUNDED, header_style="bold cyan")
    for col in columns:
        table.add_column(col)
    return table


def _fmt_data(valor: Optional[datetime]) -> str:
    return valor.strftime("%Y-%m-%d %H:%M:%S UTC") if valor else "-"


def print_player_state(estado: PlayerState, agora: datetime, console: Optional[Console] = None) -> None:
    console = console or get_console()

    table = create_table("Estado do Jogador", ["Campo", "Valor"])

    table.add_row("Nível", str(estado.level))
    table.add_row("Velocidade de mineração", f"{estado.mining_speed}/s")
    table.add_row("Capacidade da bolsa", f"{estado.bag_cap:.2f} {CURRENCY}")
    table.add_row("Corações", str(estado.hearts))
    table.add_row("Ouro não resgatado", f"{estado.unclaimed_gold:.2f} {CURRENCY}")
    table.add_row("Saldo", f"{estado.balance:.2f} {CURRENCY}")
    table.add_row("Último acúmulo", _fmt_data(estado.last_accumulate_time))
    table.add_row(
        "Sessão",
        f"ativa até {_fmt_data(estado.last_session_end_time)}" if estado.sessao_ativa(agora) else "inativa",
    )
    table.add_row(
        "Upgrade",
        f"até {_fmt_data(estado.upgrade_complete_time)}" if estado.upgrade_em_andamento(agora) else "livre",
    )
    console.print(table)


def print_missions(missoes: Iterable[Mission], console: Optional[Console] = None) -> None:
    console = console or get_console()
    missoes = list(missoes)

    if not missoes:
        console.print("[warning]Nenhuma missão encontrada.[/warning]")
        return

    table = create_table("Missões", ["ID", "Nome", "Status"])
    for missao in missoes:
        estilo = _STATUS_STYLE.get(missao.status, "")
        status = escape(missao.raw_status or missao.status.value)
        table.add_row(escape(str(missao.id)), escape(missao.name), f"[{estilo}]{status}[/{estilo}]" if estilo else status)
    console.print(table)


def print_wait_plan(plano: PlanoAcumulacao, console: Optional[Console] = None) -> None:
    console = console or get_console()
    console.print(
        f"[info]Ouro projetado:[/info] {plano.ouro_atual:.2f}/{plano.capacidade:.2f} {CURRENCY}\n"
        f"[info]Bolsa cheia em:[/info] [gold]{formatar_tempo(plano.segundos)}[/gold] "
        f"({plano.segundos}s)"
    )
