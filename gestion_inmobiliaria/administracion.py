"""Property management by agencies and the listings they publish."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .datos import (
    DTInmuebleAdministrado,
    DTNotificacion,
    DTPublicacion,
    TipoInmueble,
    TipoPublicacion,
)
from .fecha import Fecha
from .inmuebles import Apartamento, Casa, Inmueble

if TYPE_CHECKING:
    from .usuarios import Inmobiliaria


@dataclass(eq=False)
class Publicacion:
    """A sale or rental listing for a managed property."""

    codigo: int
    fecha: Fecha
    tipo: TipoPublicacion
    texto: str
    precio: float
    activa: bool = False
    administracion: AdministraPropiedad | None = field(
        default=None, init=False, repr=False
    )

    def activar(self) -> None:
        """Mark the listing as active."""
        self.activa = True

    def desactivar(self) -> None:
        """Mark the listing as inactive."""
        self.activa = False

    def cumple_filtros(
        self, tipo_publicacion: TipoPublicacion, precio_minimo: float, precio_maximo: float
    ) -> bool:
        """Whether the listing has this type and a price within the bounds."""
        return tipo_publicacion == self.tipo and precio_minimo <= self.precio <= precio_maximo

    def mismo_tipo(self, tipo_inmueble: TipoInmueble) -> bool:
        """Whether the listed property is of the given kind."""
        if tipo_inmueble is TipoInmueble.TODOS:
            return True
        if self.administracion is None or self.administracion.inmueble is None:
            return False
        inmueble = self.administracion.inmueble
        if tipo_inmueble is TipoInmueble.CASA:
            return isinstance(inmueble, Casa)
        if tipo_inmueble is TipoInmueble.APARTAMENTO:
            return isinstance(inmueble, Apartamento)
        return False

    def _inmobiliaria(self) -> Inmobiliaria | None:
        return None if self.administracion is None else self.administracion.inmobiliaria

    def datos(self) -> DTPublicacion | None:
        """Return the listing as shown to users, or None if no agency owns it."""
        inmobiliaria = self._inmobiliaria()
        if inmobiliaria is None:
            return None
        return DTPublicacion(
            self.codigo, self.fecha, self.texto, f"{self.precio:g}", inmobiliaria.nombre
        )

    def notificacion(self) -> DTNotificacion | None:
        """Return the notice for subscribers, or None if no agency owns it."""
        inmobiliaria = self._inmobiliaria()
        if inmobiliaria is None:
            return None
        return DTNotificacion(inmobiliaria.nickname, self.codigo, self.texto, self.tipo)


@dataclass(eq=False)
class AdministraPropiedad:
    """An agency's management of one property, started on a given date."""

    fecha: Fecha
    inmobiliaria: Inmobiliaria | None = field(default=None, repr=False)
    inmueble: Inmueble | None = field(default=None, repr=False)
    publicaciones: set[Publicacion] = field(default_factory=set, init=False, repr=False)
    venta_activa: Publicacion | None = field(default=None, init=False, repr=False)
    alquiler_activa: Publicacion | None = field(default=None, init=False, repr=False)

    def datos(self) -> DTInmuebleAdministrado:
        """Return the managed property with the date management began."""
        if self.inmueble is None:
            raise ValueError("la administracion no tiene inmueble")
        return DTInmuebleAdministrado(self.inmueble.codigo, self.inmueble.direccion, self.fecha)

    def existe_tipo_publicacion_actual(
        self, tipo_publicacion: TipoPublicacion, fecha_actual: Fecha
    ) -> bool:
        """Whether the active listing of this type was published on the given date."""
        activa = (
            self.venta_activa
            if tipo_publicacion is TipoPublicacion.VENTA
            else self.alquiler_activa
        )
        return activa is not None and activa.fecha == fecha_actual