"""
Funções de validação reutilizáveis.

Este módulo contém funções puras para validar dados de configuração,
garantindo integridade dos dados antes da utilização.
"""

from pathlib import Path
from typing import Any, Optional, Set

from pawbot.core.exceptions import InvalidConfigException


def validate_positive_int(value: int, field_name: str, min_value: int = 1) -> None:
    """
    Valida se um número inteiro é positivo ou maior que um mínimo.

    Args:
        value: O valor a ser validado.
        field_name: Nome do campo para mensagem de erro.
        min_value: Valor mínimo aceitável (default: 1).

    Raises:
        InvalidConfigException: Se o valor for menor que min_value.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfigException(
            f"{field_name} deve ser um número inteiro.",
            details={"value": value, "type": type(value).__name__}
        )

    if value < min_value:
        raise InvalidConfigException(
            f"{field_name} deve ser >= {min_value}",
            details={"value": value, "min_value": min_value}
        )


def validate_positive_float(value: float, field_name: str, min_value: float = 0.0) -> None:
    """Valida se um número é maior ou igual a um mínimo."""
    if not isinstance(value, (float, int)) or isinstance(value, bool):
        raise InvalidConfigException(
            f"{field_name} deve ser um número.",
            details={"value": value, "type": type(value).__name__}
        )

    if value < min_value:
        raise InvalidConfigException(
            f"{field_name} deve ser >= {min_value}",
            details={"value": value, "min_value": min_value}
        )


def validate_not_empty(value: Any, field_name: str) -> None:
    """Valida se uma string ou coleção não está vazia."""
    if not value:
        raise InvalidConfigException(f"{field_name} não pode estar vazio")


def validate_url(value: str, field_name: str) -> None:
    """Valida se o valor parece uma URL http(s)."""
    validate_not_empty(value, field_name)
    if not value.startswith(("http://", "https://")):
        raise InvalidConfigException(
            f"{field_name} deve começar com http:// ou https://",
            details={"value": value}
        )


def validate_choice(value: str, valid_choices: Set[str], field_name: str) -> None:
    """Exige que o valor pertença ao conjunto permitido."""
    if value not in valid_choices:
        raise InvalidConfigException(
            f"{field_name} inválido: {value}. Use um dos: {', '.join(sorted(valid_choices))}",
            details={"value": value, "valid_choices": sorted(valid_choices)}
        )


def ensure_parent_exists(path: Optional[str | Path]) -> Optional[Path]:
    """Resolve o caminho e cria o diretório pai, se preciso."""
    if path is None:
        return None
    resolved = Path(path).expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    return resolved


def validate_type(value: Any, expected_type: type | tuple, field_name: str) -> None:
    """
    Checagem estrita de tipo para valores vindos do YAML ou do ambiente.

    None passa direto; "true" não vira bool e True não conta como int.
    """
    if value is None:
        return

    tipos = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    nome = "|".join(t.__name__ for t in tipos)

    if isinstance(value, bool) and bool not in tipos:
        raise InvalidConfigException(
            f"{field_name} deve ser do tipo {nome}, não booleano.",
            details={"value": value, "expected": nome, "got": "bool"}
        )

    if not isinstance(value, tipos):
        raise InvalidConfigException(
            f"{field_name} deve ser do tipo {nome}.",
            details={
                "value": value,
                "expected": nome,
                "got": type(value).__name__
            }
        )
