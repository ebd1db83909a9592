"""Registration, listing and removal of properties."""

from __future__ import annotations

from .alta_usuario import AltaUsuario
from .datos import DTInmueble, DTInmuebleListado, TipoTecho
from .inmuebles import Apartamento, Casa, Inmueble
from .usuarios import Propietario


class ControllerInmueble:
    """Keeps every property by code and creates new ones for landlords."""

    def __init__(self, alta_usuario: AltaUsuario) -> None:
        self.alta_usuario = alta_usuario
        self._ultimo_codigo = 0
        self._inmuebles: dict[int, Inmueble] = {}

    def actualizar_codigo_inmueble(self) -> int:
        """Reserve and return the next property code."""
        self._ultimo_codigo += 1
        return self._ultimo_codigo

    def _propietario_en_alta(self) -> Propietario:
        propietario = self.alta_usuario.usuario_temporal
        if not isinstance(propietario, Propietario):
            raise ValueError("no hay un propietario en proceso de alta")
        return propietario

    def _registrar(self, inmueble: Inmueble, propietario: Propietario) -> int:
        inmueble.propietario = propietario
        propietario.agregar_inmueble(inmueble)
        self._inmuebles[inmueble.codigo] = inmueble
        return inmueble.codigo

    def alta_casa(
        self,
        direccion: str,
        numero_puerta: int,
        superficie: int,
        anio_construccion: int,
        es_ph: bool,
        techo: TipoTecho,
    ) -> int:
        """Create a house for the landlord being registered; return its code."""
        propietario = self._propietario_en_alta()
        casa = Casa(
            self.actualizar_codigo_inmueble(),
            direccion,
            numero_puerta,
            superficie,
            anio_construccion,
            es_ph,
            techo,
        )
        return self._registrar(casa, propietario)

    def alta_apartamento(
        self,
        direccion: str,
        numero_puerta: int,
        superficie: int,
        anio_construccion: int,
        piso: int,
        tiene_ascensor: bool,
        gastos_comunes: float,
    ) -> int:
        """Create an apartment for the landlord being registered; return its code."""
        propietario = self._propietario_en_alta()
        apartamento = Apartamento(
            self.actualizar_codigo_inmueble(),
            direccion,
            numero_puerta,
            superficie,
            anio_construccion,
            piso,
            tiene_ascensor,
            gastos_comunes,
        )
        return self._registrar(apartamento, propietario)

    def listar_inmuebles(self) -> list[DTInmuebleListado]:
        """Return every property with its owner, ordered by code."""
        return [
            DTInmuebleListado(
                codigo,
                inmueble.direccion,
                inmueble.propietario.nickname if inmueble.propietario else "",
            )
            for codigo, inmueble in sorted(self._inmuebles.items())
        ]

    def detalle_inmueble(self, codigo_inmueble: int) -> DTInmueble | None:
        """Return a property's details, or None if the code is unknown."""
        inmueble = self._inmuebles.get(codigo_inmueble)
        return None if inmueble is None else inmueble.detalle()

    def eliminar_inmueble(self, codigo_inmueble: int) -> None:
        """Remove a property with its managements and listings."""
        try:
            inmueble = self._inmuebles.pop(codigo_inmueble)
        except KeyError:
            raise KeyError(f"no existe el inmueble {codigo_inmueble}") from None
        if inmueble.propietario is not None:
            inmueble.propietario.inmuebles.discard(inmueble)
            inmueble.propietario = None
        for ap in list(inmueble.administraciones):
            for publicacion in ap.publicaciones:
                publicacion.administracion = None
                publicacion.desactivar()
            ap.publicaciones.clear()
            ap.venta_activa = None
            ap.alquiler_activa = None
            ap.inmueble = None
            if ap.inmobiliaria is not None:
                ap.inmobiliaria.administraciones.discard(ap)
                ap.inmobiliaria = None
        inmueble.administraciones.clear()