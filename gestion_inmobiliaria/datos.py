"""Enumerations and the read-only records handed out by the controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .fecha import Fecha


class TipoInmueble(Enum):
    """Kind of property used as a listing filter."""

    TODOS = 0
    CASA = 1
    APARTAMENTO = 2


class TipoPublicacion(Enum):
    """Whether a listing offers a sale or a rental."""

    VENTA = 0
    ALQUILER = 1


class TipoTecho(Enum):
    """Roof type of a house."""

    LIVIANO = 0
    A_DOS_AGUAS = 1
    PLANO = 2

    @property
    def etiqueta(self) -> str:
        """Human-readable name of the roof type."""
        return {
            TipoTecho.LIVIANO: "Liviano",
            TipoTecho.A_DOS_AGUAS: "A dos aguas",
            TipoTecho.PLANO: "Plano",
        }[self]


@dataclass(frozen=True)
class DTInmueble:
    """Details shared by every property."""

    codigo: int
    direccion: str
    numero_puerta: int
    superficie: int
    anio_construccion: int


@dataclass(frozen=True)
class DTCasa(DTInmueble):
    """Details of a house."""

    es_ph: bool
    techo: TipoTecho


@dataclass(frozen=True)
class DTApartamento(DTInmueble):
    """Details of an apartment."""

    piso: int
    tiene_ascensor: bool
    gastos_comunes: float


@dataclass(frozen=True)
class DTInmuebleAdministrado:
    """A property managed by an agency, with the date management began."""

    codigo: int
    direccion: str
    fecha_comienzo: Fecha


@dataclass(frozen=True)
class DTInmuebleListado:
    """A property as shown in a listing, with its owner's nickname."""

    codigo: int
    direccion: str
    propietario: str


@dataclass(frozen=True)
class DTNotificacion:
    """A notice sent to subscribers when an agency publishes a listing."""

    inmobiliaria_nick: str
    codigo: int
    texto: str
    tipo: TipoPublicacion


@dataclass(frozen=True)
class DTPublicacion:
    """A listing as shown to users; the price is already formatted."""

    codigo: int
    fecha: Fecha
    texto: str
    precio: str
    inmobiliaria: str


@dataclass(frozen=True, order=True)
class DTUsuario:
    """A user's nickname and name, identified and ordered by nickname."""

    nickname: str
    nombre: str = field(compare=False)