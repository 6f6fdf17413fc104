"""Contexto imutável de requisição."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RequestContext:
    """
    Credencial e identidade da conta repassadas a cada chamada de API.

    Nunca é alterado no lugar: a autenticação devolve um novo contexto.
    """

    token: str
    wallet_address: str = ""
    user_id: str = ""
    username: str = ""

    def com_carteira(self, wallet_address: str) -> RequestContext:
        """Retorna cópia com o endereço de carteira informado."""
        return replace(self, wallet_address=wallet_address)

    def com_jogador(self, user_id: str, username: str) -> RequestContext:
        """Retorna cópia com a identidade do jogador."""
        return replace(self, user_id=user_id, username=username)

    @property
    def autenticado(self) -> bool:
        return bool(self.user_id)

    def __repr__(self) -> str:
        # Nunca expõe o token completo em logs
        token = f"{self.token[:6]}..." if self.token else ""
        return (
            f"RequestContext(token={token!r}, wallet_address={self.wallet_address!r}, "
            f"user_id={self.user_id!r}, username={self.username!r})"
        )
