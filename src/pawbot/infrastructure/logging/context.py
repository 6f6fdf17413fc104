"""
Contexto compartilhado pelos registros de log.

O agente roda em uma única thread, então basta um identificador de
processo e uma pilha com as etapas do ciclo em andamento.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List
from uuid import uuid4

_ID_PROCESSO = uuid4().hex[:8]
_etapas: List[str] = []


def id_processo() -> str:
    """Identificador curto que correlaciona todos os logs desta execução."""
    return _ID_PROCESSO


def etapa_corrente() -> str:
    return " > ".join(_etapas)


@contextmanager
def etapa_ativa(nome: str) -> Iterator[None]:
    """Empilha ``nome`` enquanto o bloco executa."""
    _etapas.append(nome)
    try:
        yield
    finally:
        _etapas.pop()


def origem(profundidade: int) -> Dict[str, Any]:
    """Arquivo, linha e função de quem chamou o logger."""
    try:
        frame = sys._getframe(profundidade + 1)
    except ValueError:
        return {}
    return {
        "arquivo": Path(frame.f_code.co_filename).name,
        "linha": frame.f_lineno,
        "funcao": frame.f_code.co_name,
    }
