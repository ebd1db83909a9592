"""Publication of sale and rental listings and their queries."""

from __future__ import annotations

from .administracion import Publicacion
from .coleccion import ColeccionUsuario
from .datos import DTInmueble, DTPublicacion, TipoInmueble, TipoPublicacion
from .fecha import ControladorFechaActual
from .usuarios import Inmobiliaria


class ControllerPublicacion:
    """Keeps every listing by code."""

    def __init__(
        self, coleccion: ColeccionUsuario, controlador_fecha: ControladorFechaActual
    ) -> None:
        self.coleccion = coleccion
        self.controlador_fecha = controlador_fecha
        self._codigo = 0
        self._publicaciones: dict[int, Publicacion] = {}

    def actualizar_codigo_publicacion(self) -> int:
        """Reserve and return the next listing code."""
        self._codigo += 1
        return self._codigo

    def alta_publicacion(
        self,
        nickname_inmobiliaria: str,
        codigo_inmueble: int,
        tipo_publicacion: TipoPublicacion,
        texto: str,
        precio: float,
    ) -> bool:
        """Publish a listing for a property the agency manages.

        Returns False when the agency is unknown, does not manage the
        property, or already published a listing of this type today.
        """
        inmobiliaria = self.coleccion.buscar(nickname_inmobiliaria)
        if not isinstance(inmobiliaria, Inmobiliaria):
            return False
        ap = inmobiliaria.administracion(codigo_inmueble)
        if ap is None:
            return False
        fecha = self.controlador_fecha.fecha_actual()
        if ap.existe_tipo_publicacion_actual(tipo_publicacion, fecha):
            return False

        codigo = self.actualizar_codigo_publicacion()
        publicacion = Publicacion(codigo, fecha, tipo_publicacion, texto, precio)
        publicacion.administracion = ap
        ap.publicaciones.add(publicacion)
        self._publicaciones[codigo] = publicacion

        venta = tipo_publicacion is TipoPublicacion.VENTA
        activa = ap.venta_activa if venta else ap.alquiler_activa
        if activa is None or activa.fecha < fecha:
            if activa is not None:
                activa.desactivar()
            publicacion.activar()
            if venta:
                ap.venta_activa = publicacion
            else:
                ap.alquiler_activa = publicacion

        notificacion = publicacion.notificacion()
        if notificacion is not None:
            inmobiliaria.notificar_observadores(notificacion)
        return True

    def listar_publicaciones(
        self,
        tipo_publicacion: TipoPublicacion,
        precio_minimo: float,
        precio_maximo: float,
        tipo_inmueble: TipoInmueble,
    ) -> list[DTPublicacion]:
        """Return the listings matching the filters, ordered by code."""
        resultado = []
        for _, publicacion in sorted(self._publicaciones.items()):
            if not (
                publicacion.cumple_filtros(tipo_publicacion, precio_minimo, precio_maximo)
                and publicacion.mismo_tipo(tipo_inmueble)
            ):
                continue
            datos = publicacion.datos()
            if datos is not None:
                resultado.append(datos)
        return resultado

    def detalle_inmueble_publicacion(self, codigo_publicacion: int) -> DTInmueble | None:
        """Return the details of a listing's property, or None if there is none."""
        publicacion = self._publicaciones.get(codigo_publicacion)
        if publicacion is None or publicacion.administracion is None:
            return None
        inmueble = publicacion.administracion.inmueble
        return None if inmueble is None else inmueble.detalle()