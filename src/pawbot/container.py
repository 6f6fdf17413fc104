"""Grafo de dependências do agente (dependency-injector)."""

from __future__ import annotations

import time

import requests
from dependency_injector import containers, providers

from pawbot.adapters.api import GameAPI, WalletAPI
from pawbot.adapters.repositories import FileCredentialRepository
from pawbot.config import get_config
from pawbot.core.services import (
    AccumulationService,
    AuthService,
    CycleService,
    MissionService,
    ProgressionService,
    Supervisor,
)
from pawbot.infrastructure.logging import get_logger
from pawbot.ui import Countdown, get_console


class ApplicationContainer(containers.DeclarativeContainer):
    """Todos os providers são singletons, exceto as funções de tempo."""

    config = providers.Singleton(get_config)

    logger = providers.Singleton(get_logger, config=config.provided.logging)

    # sobrescritos nos testes
    dormir = providers.Object(time.sleep)
    monotonic = providers.Object(time.monotonic)

    http_session = providers.Singleton(requests.Session)

    game_api = providers.Singleton(
        GameAPI,
        config=config.provided.api,
        logger=logger,
        session=http_session,
    )
    wallet_api = providers.Singleton(
        WalletAPI,
        config=config.provided.api,
        logger=logger,
        session=http_session,
        page_size=config.provided.game.referral_page_size,
    )

    credential_repository = providers.Singleton(
        FileCredentialRepository,
        file_path=config.provided.supervisor.credentials_file,
        logger=logger,
    )

    countdown = providers.Singleton(Countdown, console=providers.Callable(get_console))

    auth_service = providers.Singleton(
        AuthService,
        game_api=game_api,
        wallet_api=wallet_api,
        logger=logger,
        max_tentativas=config.provided.supervisor.max_login_retries,
    )
    progression_service = providers.Singleton(
        ProgressionService,
        game_api=game_api,
        config=config.provided.game,
        logger=logger,
    )
    mission_service = providers.Singleton(
        MissionService,
        game_api=game_api,
        wallet_api=wallet_api,
        progressao=progression_service,
        config=config.provided.game,
        logger=logger,
    )
    accumulation_service = providers.Singleton(
        AccumulationService,
        game_api=game_api,
        logger=logger,
        contagem=countdown,
        monotonic=monotonic,
        dormir=dormir,
    )
    cycle_service = providers.Singleton(
        CycleService,
        game_api=game_api,
        progressao=progression_service,
        missoes=mission_service,
        acumulacao=accumulation_service,
        logger=logger,
    )
    supervisor = providers.Singleton(
        Supervisor,
        credenciais=credential_repository,
        auth=auth_service,
        ciclo=cycle_service,
        config=config.provided.supervisor,
        logger=logger,
        dormir=dormir,
    )


__all__ = ["ApplicationContainer"]
