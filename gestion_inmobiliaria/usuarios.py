"""Users of the system: clients, landlords and real-estate agencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .datos import DTNotificacion, DTUsuario

if TYPE_CHECKING:
    from .administracion import AdministraPropiedad
    from .inmuebles import Inmueble


class Usuario:
    """A registered user, identified by nickname."""

    def __init__(self, nickname: str, contrasena: str, nombre: str, email: str) -> None:
        self.nickname = nickname
        self.contrasena = contrasena
        self.nombre = nombre
        self.email = email

    def datos(self) -> DTUsuario:
        """Return the user's public data."""
        return DTUsuario(self.nickname, self.nombre)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nickname={self.nickname!r})"


class Observador:
    """Receives notifications from the agencies it subscribes to."""

    def __init__(self) -> None:
        self._notificaciones: list[DTNotificacion] = []

    def notificar(self, notificacion: DTNotificacion) -> None:
        """Store a notification."""
        self._notificaciones.append(notificacion)

    def notificaciones(self) -> list[DTNotificacion]:
        """Return the pending notifications, oldest first."""
        return list(self._notificaciones)

    def borrar_notificaciones(self) -> None:
        """Discard every pending notification."""
        self._notificaciones.clear()


class Cliente(Usuario, Observador):
    """A client looking for properties."""

    def __init__(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        apellido: str,
        documento: str,
    ) -> None:
        Usuario.__init__(self, nickname, contrasena, nombre, email)
        Observador.__init__(self)
        self.apellido = apellido
        self.documento = documento


class Propietario(Usuario, Observador):
    """A landlord who owns properties."""

    def __init__(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        cuenta_bancaria: str,
        telefono: str,
    ) -> None:
        Usuario.__init__(self, nickname, contrasena, nombre, email)
        Observador.__init__(self)
        self.cuenta_bancaria = cuenta_bancaria
        self.telefono = telefono
        self.inmuebles: set[Inmueble] = set()

    def agregar_inmueble(self, inmueble: Inmueble) -> None:
        """Add a property to those this landlord owns."""
        self.inmuebles.add(inmueble)


class Inmobiliaria(Usuario):
    """A real-estate agency that manages properties and publishes listings."""

    def __init__(
        self,
        nickname: str,
        contrasena: str,
        nombre: str,
        email: str,
        direccion: str,
        url: str,
        telefono: str,
    ) -> None:
        super().__init__(nickname, contrasena, nombre, email)
        self.direccion = direccion
        self.url = url
        self.telefono = telefono
        self.propietarios: set[Propietario] = set()
        self.administraciones: set[AdministraPropiedad] = set()
        self.observadores: set[Observador] = set()

    def administracion(self, codigo_inmueble: int) -> AdministraPropiedad | None:
        """Return the management of the property with this code, if any."""
        return next(
            (
                ap
                for ap in self.administraciones
                if ap.inmueble is not None and ap.inmueble.codigo == codigo_inmueble
            ),
            None,
        )

    def esta_suscrito(self, observador: Observador) -> bool:
        """Whether the observer is subscribed to this agency."""
        return observador in self.observadores

    def suscribir(self, observador: Observador) -> None:
        """Subscribe an observer to this agency's notifications."""
        self.observadores.add(observador)

    def desuscribir(self, observador: Observador) -> None:
        """Remove an observer's subscription, if it has one."""
        self.observadores.discard(observador)

    def notificar_observadores(self, notificacion: DTNotificacion) -> None:
        """Send a notification to every subscribed observer."""
        for observador in self.observadores:
            observador.notificar(notificacion)