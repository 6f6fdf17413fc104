"""Ponto de entrada da Interface de Linha de Comando (CLI) do PawBot."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dependency_injector import providers
from typing_extensions import Annotated

from pawbot.config import get_config
from pawbot.container import ApplicationContainer
from pawbot.core.domain import RequestContext
from pawbot.core.exceptions import ConfigurationException, PawBotBaseException
from pawbot.core.services import agora_utc
from pawbot.ui import (
    get_console,
    print_banner,
    print_error,
    print_missions,
    print_player_state,
    print_wait_plan,
    print_warning,
)

# --- Configuração da Aplicação CLI ---
app = typer.Typer(
    name="pawbot",
    help="Automação sem supervisão do Robot Cat na PawWallet.",
    add_completion=False,
    rich_markup_mode="rich",
)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Arquivo YAML de configuração."),
]
CredentialsOption = Annotated[
    Optional[Path],
    typer.Option("--credentials", help="Arquivo com o token (padrão: data.txt)."),
]
DebugOption = Annotated[
    bool,
    typer.Option("--debug", help="Ativa logs de depuração."),
]


def _montar_container(
    config_path: Optional[Path],
    credentials: Optional[Path],
    debug: bool,
) -> ApplicationContainer:
    """Carrega a configuração, aplica as opções da CLI e cria o container."""
    try:
        app_config = get_config(reload=True, config_path=str(config_path) if config_path else None)
    except ConfigurationException as e:
        print_error(f"Configuração inválida: {e}")
        raise typer.Exit(code=1)

    if credentials:
        app_config.supervisor.credentials_file = credentials
    if debug:
        app_config.debug = True
        app_config.logging.nivel_minimo = "DEBUG"

    container = ApplicationContainer()
    container.config.override(providers.Object(app_config))
    return container


def _autenticar(container: ApplicationContainer) -> RequestContext:
    try:
        token = container.credential_repository().carregar()
        return container.auth_service().autenticar(RequestContext(token=token))
    except PawBotBaseException as e:
        print_error(f"Falha na autenticação: {e}")
        raise typer.Exit(code=1)


# --- Comando Principal: run ---
@app.command(help="[bold green]Executa o agente indefinidamente.[/bold green]")
def run(
    config: ConfigOption = None,
    credentials: CredentialsOption = None,
    debug: DebugOption = False,
) -> None:
    container = _montar_container(config, credentials, debug)
    app_config = container.config()
    logger = container.logger()

    print_banner(app_config.app_name, app_config.version)

    try:
        container.supervisor().executar()
    except KeyboardInterrupt:
        print_warning("Interrompido pelo usuário.")
    finally:
        logger.close()


@app.command(help="Mostra o estado atual do jogador.")
def status(
    config: ConfigOption = None,
    credentials: CredentialsOption = None,
    debug: DebugOption = False,
) -> None:
    container = _montar_container(config, credentials, debug)
    contexto = _autenticar(container)

    try:
        estado = container.game_api().obter_estado(contexto)
    except PawBotBaseException as e:
        print_error(f"Falha ao obter estado: {e}")
        raise typer.Exit(code=1)

    print_player_state(estado, agora_utc())


@app.command(help="Lista as missões e seus status.")
def missions(
    config: ConfigOption = None,
    credentials: CredentialsOption = None,
    debug: DebugOption = False,
) -> None:
    container = _montar_container(config, credentials, debug)
    contexto = _autenticar(container)

    try:
        lista = container.game_api().listar_missoes(contexto)
    except PawBotBaseException as e:
        print_error(f"Falha ao listar missões: {e}")
        raise typer.Exit(code=1)

    print_missions(lista)


@app.command("wait-time", help="Calcula quanto falta para a bolsa encher.")
def wait_time(
    config: ConfigOption = None,
    credentials: CredentialsOption = None,
    debug: DebugOption = False,
) -> None:
    container = _montar_container(config, credentials, debug)
    contexto = _autenticar(container)

    try:
        plano = container.accumulation_service().planejar(contexto)
    except PawBotBaseException as e:
        print_error(f"Falha ao calcular espera: {e}")
        raise typer.Exit(code=1)

    print_wait_plan(plano, console=get_console())


if __name__ == "__main__":
    app()
