"""
Implementação de repositório de credencial em arquivo.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pawbot.core.exceptions import CredentialException
from pawbot.interfaces.repositories import ICredentialRepository


class FileCredentialRepository(ICredentialRepository):
    """Lê o token bearer de um arquivo de texto (``data.txt``)."""

    def __init__(self, file_path: str | Path, logger: Optional[Any] = None):
        self.file_path = Path(file_path)
        if logger is None:
            from pawbot.infrastructure.logging import get_logger
            logger = get_logger()
        self.logger = logger

    def carregar(self) -> str:
        """
        Lê o token do arquivo, sem espaços nas pontas.

        Raises:
            CredentialException: Se o arquivo não existir, não puder ser lido ou estiver vazio.
        """
        if not self.file_path.exists():
            raise CredentialException(
                f"Arquivo de credencial não encontrado: {self.file_path}",
                details={"path": str(self.file_path)}
            )

        try:
            token = self.file_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialException(
                f"Erro ao ler arquivo de credencial: {e}",
                details={"path": str(self.file_path)},
                cause=e,
            ) from e

        if not token:
            raise CredentialException(
                f"Arquivo de credencial vazio: {self.file_path}",
                details={"path": str(self.file_path)}
            )

        self.logger.debug(f"Credencial carregada de {self.file_path}")
        return token
