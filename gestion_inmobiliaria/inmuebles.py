"""Properties: houses and apartments owned by a landlord."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .datos import DTApartamento, DTCasa, DTInmueble, TipoTecho

if TYPE_CHECKING:
    from .administracion import AdministraPropiedad
    from .usuarios import Propietario


@dataclass(eq=False)
class Inmueble:
    """A property, identified by its code."""

    codigo: int
    direccion: str
    numero_puerta: int
    superficie: int
    anio_construccion: int
    propietario: Propietario | None = field(default=None, init=False, repr=False)
    administraciones: set[AdministraPropiedad] = field(
        default_factory=set, init=False, repr=False
    )

    def agregar_administracion(self, ap: AdministraPropiedad) -> None:
        """Record that an agency manages this property."""
        self.administraciones.add(ap)

    def detalle(self) -> DTInmueble:
        """Return the property's details."""
        return DTInmueble(
            self.codigo,
            self.direccion,
            self.numero_puerta,
            self.superficie,
            self.anio_construccion,
        )


@dataclass(eq=False)
class Casa(Inmueble):
    """A house."""

    es_ph: bool
    techo: TipoTecho

    def detalle(self) -> DTCasa:
        """Return the house's details."""
        return DTCasa(
            self.codigo,
            self.direccion,
            self.numero_puerta,
            self.superficie,
            self.anio_construccion,
            self.es_ph,
            self.techo,
        )


@dataclass(eq=False)
class Apartamento(Inmueble):
    """An apartment."""

    piso: int
    tiene_ascensor: bool
    gastos_comunes: float

    def detalle(self) -> DTApartamento:
        """Return the apartment's details."""
        return DTApartamento(
            self.codigo,
            self.direccion,
            self.numero_puerta,
            self.superficie,
            self.anio_construccion,
            self.piso,
            self.tiene_ascensor,
            self.gastos_comunes,
        )