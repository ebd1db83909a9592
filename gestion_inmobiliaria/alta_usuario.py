"""Registration of users, agency representation and subscriptions."""

from __future__ import annotations

from .administracion import AdministraPropiedad
from .coleccion import ColeccionUsuario
from .datos import DTInmuebleAdministrado, DTNotificacion, DTUsuario
from .fecha import ControladorFechaActual
from .usuarios import Cliente, Inmobiliaria, Observador, Propietario, Usuario


class AltaUsuario:
    """Registers users and keeps the user currently being set up."""

    def __init__(
        self, coleccion: ColeccionUsuario, controlador_fecha: ControladorFechaActual
    ) -> None:
        self.coleccion = coleccion
        self.controlador_fecha = controlador_fecha
        self.usuario_temporal: Usuario | None = None

    def guardar_referencia(self, usuario: Usuario | None) -> None:
        """Remember the user the following operations act on."""
        self.usuario_temporal = usuario

    def alta_cliente(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        apellido: str,
        documento: str,
    ) -> bool:
        """Register a client; False if the nickname is taken."""
        if self.coleccion.existe(nickname):
            return False
        self.coleccion.agregar(
            Cliente(nickname, contrasena, nombre, email, apellido, documento)
        )
        return True

    def alta_propietario(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        cuenta_bancaria: str,
        telefono: str,
    ) -> bool:
        """Register a landlord and remember it; False if the nickname is taken."""
        if self.coleccion.existe(nickname):
            return False
        propietario = Propietario(
            nickname, contrasena, nombre, email, cuenta_bancaria, telefono
        )
        self.coleccion.agregar(propietario)
        self.guardar_referencia(propietario)
        return True

    def alta_inmobiliaria(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        direccion: str,
        url: str,
        telefono: str,
    ) -> bool:
        """Register an agency and remember it; False if the nickname is taken."""
        if self.coleccion.existe(nickname):
            return False
        inmobiliaria = Inmobiliaria(
            nickname, contrasena, nombre, email, direccion, url, telefono
        )
        self.coleccion.agregar(inmobiliaria)
        self.guardar_referencia(inmobiliaria)
        return True

    def _listar(self, tipo: type) -> list[DTUsuario]:
        return sorted(u.datos() for u in self.coleccion if isinstance(u, tipo))

    def listar_propietarios(self) -> list[DTUsuario]:
        """Return every landlord, ordered by nickname."""
        return self._listar(Propietario)

    def listar_inmobiliarias(self) -> list[DTUsuario]:
        """Return every agency, ordered by nickname."""
        return self._listar(Inmobiliaria)

    def representar_propietario(self, nickname_propietario: str) -> bool:
        """Make the agency being set up manage every property of a landlord.

        Returns False when the landlord is unknown or no agency is being set up.
        """
        propietario = self.coleccion.buscar(nickname_propietario)
        inmobiliaria = self.usuario_temporal
        if not isinstance(propietario, Propietario) or not isinstance(
            inmobiliaria, Inmobiliaria
        ):
            return False
        fecha = self.controlador_fecha.fecha_actual()
        for inmueble in sorted(propietario.inmuebles, key=lambda i: i.codigo):
            if inmobiliaria.administracion(inmueble.codigo) is not None:
                continue
            ap = AdministraPropiedad(fecha, inmobiliaria=inmobiliaria, inmueble=inmueble)
            inmobiliaria.administraciones.add(ap)
            inmueble.agregar_administracion(ap)
        inmobiliaria.propietarios.add(propietario)
        return True

    def finalizar_alta_usuario(self) -> None:
        """Forget the user being set up."""
        self.usuario_temporal = None

    def listar_inmuebles_administrados(
        self, nickname_inmobiliaria: str
    ) -> list[DTInmuebleAdministrado]:
        """Return the properties an agency manages, ordered by code."""
        inmobiliaria = self.coleccion.buscar(nickname_inmobiliaria)
        if not isinstance(inmobiliaria, Inmobiliaria):
            return []
        return sorted(
            (ap.datos() for ap in inmobiliaria.administraciones if ap.inmueble is not None),
            key=lambda dt: dt.codigo,
        )

    def listar_no_suscripciones(self, nickname: str) -> list[DTUsuario]:
        """Remember a user and list the agencies it is not subscribed to."""
        suscriptor = self.coleccion.buscar(nickname)
        self.guardar_referencia(suscriptor)
        return sorted(
            u.datos()
            for u in self.coleccion
            if isinstance(u, Inmobiliaria)
            and not (isinstance(suscriptor, Observador) and u.esta_suscrito(suscriptor))
        )

    def agregar_suscripciones(self, nicknames_inmobiliarias) -> None:
        """Subscribe the remembered user to each named agency."""
        suscriptor = self.usuario_temporal
        if not isinstance(suscriptor, Observador):
            return
        for nickname in nicknames_inmobiliarias:
            inmobiliaria = self.coleccion.buscar(nickname)
            if isinstance(inmobiliaria, Inmobiliaria):
                inmobiliaria.suscribir(suscriptor)

    def consultar_notificaciones(self, nickname: str) -> list[DTNotificacion]:
        """Return and discard a user's pending notifications."""
        usuario = self.coleccion.buscar(nickname)
        if usuario is None:
            raise LookupError(f"no existe el usuario {nickname!r}")
        if not isinstance(usuario, Observador):
            raise TypeError(f"el usuario {nickname!r} no recibe notificaciones")
        notificaciones = usuario.notificaciones()
        usuario.borrar_notificaciones()
        return notificaciones