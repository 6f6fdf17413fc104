"""
Carregador de configuração (Loader).

Responsável por ler arquivos de configuração (YAML) e aplicar overrides
via variáveis de ambiente, retornando uma instância válida de AppConfig.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pawbot.config.constants import DEFAULTS
from pawbot.config.models import AppConfig
from pawbot.core.exceptions import ConfigurationException, MissingConfigException


class ConfigLoaderException(ConfigurationException):
    """Arquivo de configuração ilegível ou malformado."""


class ConfigLoader:
    """Monta o AppConfig a partir de defaults, YAML e ambiente."""

    DEFAULT_FILENAME = DEFAULTS["config_file"]

    @classmethod
    def load(cls, path: Optional[Path | str] = None) -> AppConfig:
        """
        Carrega a configuração completa.

        O ambiente (PAWBOT_*) vence o YAML, que vence os defaults do código.

        Args:
            path: Caminho opcional para o arquivo config.yaml

        Returns:
            AppConfig: Configuração validada e carregada.

        Raises:
            MissingConfigException: Se ``path`` foi informado e não existe.
            ConfigLoaderException: Se houver erro de parsing ou validação.
        """
        if path and not Path(path).exists():
            raise MissingConfigException(
                f"Arquivo de configuração não encontrado: {path}",
                details={"path": str(path)}
            )
        config_path = Path(path) if path else Path(cls.DEFAULT_FILENAME)

        merged_data = cls._apply_env_overrides(cls._read_yaml(config_path))

        try:
            return AppConfig.from_dict(merged_data)
        except Exception as e:
            raise ConfigLoaderException(f"Erro ao validar configuração: {e}", cause=e) from e

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        """Arquivo ausente equivale a um mapeamento vazio."""
        if not path.exists():
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoaderException(f"Erro ao ler arquivo {path}: {e}", cause=e) from e

        if not isinstance(data, dict):
            raise ConfigLoaderException(
                f"Arquivo {path} deve conter um mapeamento YAML",
                details={"type": type(data).__name__}
            )
        return data

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Aplica overrides via variáveis de ambiente (PAWBOT_...)."""
        out = {k: (dict(v) if isinstance(v, dict) else v) for k, v in data.items()}

        # variável -> (caminho no dict, conversor)
        overrides = {
            "PAWBOT_DEBUG": (["debug"], cls._parse_bool),
            "PAWBOT_CREDENTIALS_FILE": (["supervisor", "credentials_file"], str),
            "PAWBOT_RETRY_DELAY": (["supervisor", "retry_delay"], float),
            "PAWBOT_MIN_HEARTS": (["game", "min_hearts"], int),
            "PAWBOT_TIMEOUT": (["api", "timeout"], int),
            "PAWBOT_LOG_LEVEL": (["logging", "nivel_minimo"], str),
            "PAWBOT_LOG_FILE": (["logging", "arquivo_log"], str),
        }

        for env_var, (keys, type_func) in overrides.items():
            val = os.getenv(env_var)
            if val is None:
                continue
            try:
                cls._set_nested(out, keys, type_func(val))
            except ValueError as e:
                raise ConfigLoaderException(
                    f"Valor inválido em {env_var}: {val!r}", cause=e
                ) from e

        return out

    @staticmethod
    def _set_nested(data: Dict[str, Any], keys: list, value: Any) -> None:
        """Helper para setar valor em dict aninhado."""
        current = data
        for key in keys[:-1]:
            current = current.setdefault(key, {})
        current[keys[-1]] = value

    @staticmethod
    def _parse_bool(val: str) -> bool:
        """Parse seguro de boolean."""
        return val.lower() in ("true", "1", "yes", "on")
