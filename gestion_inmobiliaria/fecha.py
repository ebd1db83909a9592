"""Calendar dates and the controller that holds the system's current date."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Fecha:
    """A day/month/year date, ordered chronologically."""

    dia: int
    mes: int
    anio: int

    def _clave(self) -> tuple[int, int, int]:
        return (self.anio, self.mes, self.dia)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fecha):
            return NotImplemented
        return self._clave() < other._clave()

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.anio}"


class ControladorFechaActual:
    """Keeps the date the system treats as "today"."""

    FECHA_INICIAL = Fecha(1, 1, 1900)

    def __init__(self) -> None:
        self._fecha_actual = self.FECHA_INICIAL

    def fecha_actual(self) -> Fecha:
        """Return the current date."""
        return self._fecha_actual

    def set_nueva_fecha(self, dia: int, mes: int, anio: int) -> None:
        """Replace the current date."""
        self._fecha_actual = Fecha(dia, mes, anio)