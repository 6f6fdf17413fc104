"""Dataclasses de configuração, validadas em ``__post_init__``."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from pawbot.config.constants import (
    BASE_GAME_URL,
    BASE_WALLET_URL,
    DEFAULT_ORIGIN,
    DEFAULT_USER_AGENT,
    DEFAULTS,
    INVITE_FRIENDS_MISSION_ID,
    LEVEL_VALUES,
    MIN_HEARTS,
    REFERRAL_PAGE_SIZE,
    RETRY_DELAY_SECONDS,
)
from pawbot.config.validators import (
    ensure_parent_exists,
    validate_choice,
    validate_not_empty,
    validate_positive_float,
    validate_positive_int,
    validate_type,
    validate_url,
)


@dataclass
class LoggerConfig:
    """Nível, arquivo e aparência do log."""

    nome: str = "pawbot"
    nivel_minimo: str = "INFO"
    arquivo_log: Optional[Path] = None
    sobrescrever_arquivo: bool = False
    mostrar_tempo: bool = True
    usar_cores: bool = True

    def __post_init__(self):
        self.nivel_minimo = self.nivel_minimo.upper()
        validate_choice(self.nivel_minimo, set(LEVEL_VALUES.keys()), "nivel_minimo")

        if self.arquivo_log:
            self.arquivo_log = ensure_parent_exists(self.arquivo_log)

    def validate(self):
        """Revalida a configuração após alterações manuais."""
        self.__post_init__()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LoggerConfig:
        clean_data = {k: v for k, v in data.items() if k in cls.__annotations__}

        if "nivel_minimo" in clean_data: validate_type(clean_data["nivel_minimo"], str, "logging.nivel_minimo")
        if "usar_cores" in clean_data: validate_type(clean_data["usar_cores"], bool, "logging.usar_cores")
        if "mostrar_tempo" in clean_data: validate_type(clean_data["mostrar_tempo"], bool, "logging.mostrar_tempo")

        if clean_data.get("arquivo_log"):
            clean_data["arquivo_log"] = Path(clean_data["arquivo_log"])

        return cls(**clean_data)


@dataclass
class ApiConfig:
    """Configuração dos endpoints remotos e dos headers enviados."""

    wallet_url: str = BASE_WALLET_URL
    game_url: str = BASE_GAME_URL
    timeout: int = DEFAULTS["timeout_api"]
    user_agent: str = DEFAULT_USER_AGENT
    origin: str = DEFAULT_ORIGIN

    def __post_init__(self):
        validate_url(self.wallet_url, "wallet_url")
        validate_url(self.game_url, "game_url")
        validate_positive_int(self.timeout, "timeout")
        validate_not_empty(self.user_agent, "user_agent")
        self.wallet_url = self.wallet_url.rstrip("/")
        self.game_url = self.game_url.rstrip("/")

    @property
    def referer(self) -> str:
        return f"{self.origin.rstrip('/')}/"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ApiConfig:
        clean = {k: v for k, v in data.items() if k in cls.__annotations__}

        if "timeout" in clean: validate_type(clean["timeout"], int, "api.timeout")
        for chave in ("wallet_url", "game_url", "user_agent", "origin"):
            if chave in clean: validate_type(clean[chave], str, f"api.{chave}")

        return cls(**clean)


@dataclass
class GameConfig:
    """Regras de progressão usadas pelos serviços."""

    min_hearts: int = MIN_HEARTS
    invite_mission_id: Any = INVITE_FRIENDS_MISSION_ID
    referral_page_size: int = REFERRAL_PAGE_SIZE

    def __post_init__(self):
        validate_positive_int(self.min_hearts, "min_hearts", min_value=0)
        validate_positive_int(self.referral_page_size, "referral_page_size")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameConfig:
        clean = {k: v for k, v in data.items() if k in cls.__annotations__}

        if "min_hearts" in clean: validate_type(clean["min_hearts"], int, "game.min_hearts")
        if "referral_page_size" in clean: validate_type(clean["referral_page_size"], int, "game.referral_page_size")

        return cls(**clean)


@dataclass
class SupervisorConfig:
    """Configuração do laço de resiliência."""

    credentials_file: Path = field(default_factory=lambda: Path(DEFAULTS["credentials_file"]))
    retry_delay: float = RETRY_DELAY_SECONDS
    max_login_retries: int = 1

    def __post_init__(self):
        self.credentials_file = Path(self.credentials_file)
        validate_positive_float(self.retry_delay, "retry_delay")
        validate_positive_int(self.max_login_retries, "max_login_retries", min_value=0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SupervisorConfig:
        clean = {k: v for k, v in data.items() if k in cls.__annotations__}

        if "retry_delay" in clean: validate_type(clean["retry_delay"], (int, float), "supervisor.retry_delay")
        if "max_login_retries" in clean: validate_type(clean["max_login_retries"], int, "supervisor.max_login_retries")
        if "credentials_file" in clean: validate_type(clean["credentials_file"], (str, Path), "supervisor.credentials_file")

        return cls(**clean)


@dataclass
class AppConfig:
    """Raiz: seções api, game, supervisor e logging."""

    app_name: str = "PawBot"
    version: str = "1.0.0"
    debug: bool = False

    api: Optional[ApiConfig] = None
    game: Optional[GameConfig] = None
    supervisor: Optional[SupervisorConfig] = None
    logging: Optional[LoggerConfig] = None

    def __post_init__(self):
        if self.api is None: self.api = ApiConfig()
        if self.game is None: self.game = GameConfig()
        if self.supervisor is None: self.supervisor = SupervisorConfig()
        if self.logging is None: self.logging = LoggerConfig()

        if self.debug and self.logging.nivel_minimo != "DEBUG":
            self.logging.nivel_minimo = "DEBUG"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        api = ApiConfig.from_dict(data.get("api") or {})
        game = GameConfig.from_dict(data.get("game") or {})
        supervisor = SupervisorConfig.from_dict(data.get("supervisor") or {})
        logging = LoggerConfig.from_dict(data.get("logging") or {})

        nested_keys = {"api", "game", "supervisor", "logging"}
        root_args = {k: v for k, v in data.items() if k in cls.__annotations__ and k not in nested_keys}

        if "debug" in root_args: validate_type(root_args["debug"], bool, "debug")

        return cls(
            **root_args,
            api=api,
            game=game,
            supervisor=supervisor,
            logging=logging,
        )
