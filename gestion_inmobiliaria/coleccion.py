"""The collection of every registered user."""

from __future__ import annotations

from collections.abc import Iterator

from .usuarios import Usuario


class ColeccionUsuario:
    """Registered users, looked up by nickname."""

    def __init__(self) -> None:
        self._usuarios: list[Usuario] = []

    def agregar(self, usuario: Usuario) -> None:
        """Add a user; adding the same user twice has no effect."""
        if not any(u is usuario for u in self._usuarios):
            self._usuarios.append(usuario)

    def existe(self, nickname: str) -> bool:
        """Whether a user with this nickname is registered."""
        return self.buscar(nickname) is not None

    def buscar(self, nickname: str) -> Usuario | None:
        """Return the user with this nickname, or None."""
        return next((u for u in self._usuarios if u.nickname == nickname), None)

    def __iter__(self) -> Iterator[Usuario]:
        return iter(list(self._usuarios))

    def __len__(self) -> int:
        return len(self._usuarios)

    def __contains__(self, nickname: object) -> bool:
        return isinstance(nickname, str) and self.existe(nickname)