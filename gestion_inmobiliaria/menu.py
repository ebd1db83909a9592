"""Interactive text menu over the system's operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from .administracion import AdministraPropiedad
from .datos import (
    DTApartamento,
    DTCasa,
    DTInmueble,
    DTUsuario,
    TipoInmueble,
    TipoPublicacion,
    TipoTecho,
)
from .inmuebles import Inmueble
from .sistema import Sistema
from .usuarios import Inmobiliaria, Observador, Propietario

_TECHOS = {1: TipoTecho.A_DOS_AGUAS, 2: TipoTecho.PLANO}
_TIPOS_INMUEBLE = {1: TipoInmueble.CASA, 2: TipoInmueble.APARTAMENTO}
_ETIQUETA_PUBLICACION = {TipoPublicacion.VENTA: "Venta", TipoPublicacion.ALQUILER: "Alquiler"}


def _si_no(valor: bool) -> str:
    return "Si" if valor else "No"


def formatear_inmueble(dt: DTInmueble) -> str:
    """Return one line describing a property's details."""
    texto = (
        f"Codigo: {dt.codigo}, direccion: {dt.direccion}, nro. puerta: {dt.numero_puerta}, "
        f"superficie: {dt.superficie} m2, construccion: {dt.anio_construccion}"
    )
    if isinstance(dt, DTCasa):
        return f"{texto}, PH: {_si_no(dt.es_ph)}, Tipo de techo: {dt.techo.etiqueta}"
    if isinstance(dt, DTApartamento):
        return (
            f"{texto}, piso: {dt.piso}, ascensor: {_si_no(dt.tiene_ascensor)}, "
            f"gastos comunes: {dt.gastos_comunes:g}"
        )
    return texto


class Menu:
    """Reads operations from a text stream and runs them on a system."""

    def __init__(
        self,
        sistema: Sistema | None = None,
        entrada: TextIO | None = None,
        salida: TextIO | None = None,
    ) -> None:
        self.sistema = sistema if sistema is not None else Sistema()
        self.entrada = entrada if entrada is not None else sys.stdin
        self.salida = salida if salida is not None else sys.stdout
        self._operaciones: dict[int, tuple[str, Callable[[], None]]] = {
            1: ("ALTA DE USUARIO", self.alta_usuario),
            2: ("ALTA DE PUBLICACION", self.alta_publicacion),
            3: ("CONSULTA DE PUBLICACIONES", self.consulta_publicaciones),
            4: ("ELIMINAR INMUEBLE", self.eliminar_inmueble),
            5: ("SUSCRIBIRSE A NOTIFICACIONES", self.suscribirse_notificaciones),
            6: ("CONSULTAR NOTIFICACIONES", self.consulta_notificaciones),
            7: ("ELIMINAR SUSCRIPCIONES", self.eliminar_suscripciones),
            8: ("ALTA ADMINISTRACION DE PROPIEDAD", self.alta_administracion_propiedad),
            9: ("CARGAR DATOS", self.cargar_datos),
            10: ("VER FECHA ACTUAL", self.ver_fecha_actual),
            11: ("ASIGNAR FECHA ACTUAL", self.asignar_fecha_actual),
        }

    # --- input and output -------------------------------------------------

    def _imprimir(self, texto: str = "") -> None:
        print(texto, file=self.salida)

    def _preguntar(self, prompt: str) -> str:
        self.salida.write(prompt)
        self.salida.flush()
        linea = self.entrada.readline()
        if not linea:
            raise EOFError("no hay mas entrada")
        return linea.rstrip("\r\n")

    def _entero(self, prompt: str) -> int:
        return int(self._preguntar(prompt).strip())

    def _real(self, prompt: str) -> float:
        return float(self._preguntar(prompt).strip())

    def _confirmar(self, prompt: str) -> bool:
        return self._entero(prompt) == 1

    def _tipo_publicacion(self) -> TipoPublicacion:
        if self._entero("Tipo de Publicacion: (1: Venta, 0: Alquiler) ") == 1:
            return TipoPublicacion.VENTA
        return TipoPublicacion.ALQUILER

    def _listar_usuarios(self, titulo: str, usuarios: Iterable[DTUsuario]) -> None:
        self._imprimir(titulo)
        for dt in usuarios:
            self._imprimir(f"- Nickname: {dt.nickname}, Nombre: {dt.nombre}")

    def _leer_nicknames(self) -> list[str]:
        nicknames = []
        while nick := self._preguntar("Nickname de la inmobiliaria (vacio para terminar): ").strip():
            nicknames.append(nick)
        return nicknames

    # --- menu -------------------------------------------------------------

    def mostrar(self) -> None:
        """Print the list of operations and the prompt for one."""
        self._imprimir("=== Menu de Operaciones ===")
        for numero, (encabezado, _) in self._operaciones.items():
            self._imprimir(f"{numero}. {encabezado.capitalize()}")
        self._imprimir("0. Salir")
        self.salida.write("Ingrese el codigo de operacion: ")
        self.salida.flush()

    def ejecutar(self, opcion: int) -> bool:
        """Run one operation; return False when the user chose to quit."""
        if opcion == 0:
            self._imprimir("Saliendo del programa...")
            return False
        operacion = self._operaciones.get(opcion)
        if operacion is None:
            self._imprimir("Opcion no valida. Intente de nuevo.")
            return True
        encabezado, accion = operacion
        self._imprimir(f" - {encabezado} - ")
        accion()
        return True

    def run(self) -> int:
        """Show the menu and run operations until the user quits or input ends."""
        while True:
            self.mostrar()
            try:
                texto = self._preguntar("")
                try:
                    opcion = int(texto.strip())
                except ValueError:
                    opcion = -1
                if not self.ejecutar(opcion):
                    return 0
            except EOFError:
                self._imprimir()
                return 0
            except ValueError:
                self._imprimir("Entrada no valida.")
            self._imprimir()

    # --- operations -------------------------------------------------------

    def alta_usuario(self) -> None:
        """Register a client, agency or landlord, with its related data."""
        alta = self.sistema.alta_usuario
        tipo = self._entero(
            "Ingrese el tipo de usuario (0: Cliente, 1: Inmobiliaria, 2: Propietario): "
        )
        if not 0 <= tipo <= 2:
            self._imprimir("Opcion no valida. Intente de nuevo.")
            return
        nickname = self._preguntar("Nickname: ")
        contrasena = self._preguntar("Contrasena: ")
        nombre = self._preguntar("Nombre: ")
        email = self._preguntar("Email: ")
        if tipo == 0:
            apellido = self._preguntar("Apellido: ")
            documento = self._preguntar("Documento: ")
            ok = alta.alta_cliente(nickname, contrasena, nombre, email, apellido, documento)
        elif tipo == 1:
            direccion = self._preguntar("Direccion: ")
            url = self._preguntar("URL: ")
            telefono = self._preguntar("Telefono: ")
            ok = alta.alta_inmobiliaria(
                nickname, contrasena, nombre, email, direccion, url, telefono
            )
        else:
            cuenta = self._preguntar("Cuenta Bancaria: ")
            telefono = self._preguntar("Telefono: ")
            ok = alta.alta_propietario(nickname, contrasena, nombre, email, cuenta, telefono)
        if not ok:
            self._imprimir("Error al crear el usuario")
            return
        try:
            if tipo in (1, 2):
                seguir = self._entero("¿Quiere ingresar los datos relacionados? (1: Si, 0: No): ")
                while seguir != 0:
                    if tipo == 1:
                        self._representar_propietario()
                    else:
                        self._ingresar_inmueble()
                    seguir = self._entero("¿Quiere seguir ingresando? (1: Si, 0: No): ")
        finally:
            alta.finalizar_alta_usuario()
        self._imprimir("Usuario creado.")

    def _representar_propietario(self) -> None:
        alta = self.sistema.alta_usuario
        self._listar_usuarios("Lista de Propietarios:", alta.listar_propietarios())
        nickname = self._preguntar("Nickname propietario a representar: ")
        if not alta.representar_propietario(nickname):
            self._imprimir("No existe el propietario.")

    def _ingresar_inmueble(self) -> None:
        ci = self.sistema.controller_inmueble
        es_casa = self._entero("Indique el tipo de inmueble (1: Casa, 0: Apartamento): ") == 1
        direccion = self._preguntar("Direccion: ")
        numero_puerta = self._entero("Numero de Puerta: ")
        superficie = self._entero("Superficie: ")
        anio = self._entero("Ano de Construccion: ")
        if es_casa:
            es_ph = self._confirmar("Es PH (1 para si, 0 para no): ")
            techo = _TECHOS.get(
                self._entero("Tipo de Techo (0: Liviano 1: A dos aguas, 2: Plano): "),
                TipoTecho.LIVIANO,
            )
            codigo = ci.alta_casa(direccion, numero_puerta, superficie, anio, es_ph, techo)
        else:
            piso = self._entero("Piso: ")
            ascensor = self._confirmar("Tiene Ascensor (1 para si, 0 para no): ")
            gastos = self._real("Gastos Comunes: ")
            codigo = ci.alta_apartamento(
                direccion, numero_puerta, superficie, anio, piso, ascensor, gastos
            )
        self._imprimir(f"Inmueble creado con codigo {codigo}.")

    def alta_publicacion(self) -> None:
        """Publish a listing for a property an agency manages."""
        alta = self.sistema.alta_usuario
        self._listar_usuarios("Lista de Inmobiliarias:", alta.listar_inmobiliarias())
        nickname = self._preguntar("Nickname de la inmobiliaria: ")
        for dt in alta.listar_inmuebles_administrados(nickname):
            self._imprimir(
                f"- Codigo: {dt.codigo}, Direccion: {dt.direccion}, "
                f"Fecha de comienzo: {dt.fecha_comienzo}"
            )
        codigo = self._entero("Inmueble: ")
        tipo = self._tipo_publicacion()
        texto = self._preguntar("Texto: ")
        precio = self._real("Precio: ")
        if self.sistema.controller_publicacion.alta_publicacion(
            nickname, codigo, tipo, texto, precio
        ):
            self._imprimir("Publicacion creada.")
        else:
            self._imprimir("No se pudo crear la publicacion.")

    def consulta_publicaciones(self) -> None:
        """List the listings matching filters and optionally show a property."""
        cp = self.sistema.controller_publicacion
        tipo = self._tipo_publicacion()
        minimo = self._real("Precio (Min): ")
        maximo = self._real("Precio (Max): ")
        tipo_inmueble = _TIPOS_INMUEBLE.get(
            self._entero("Tipo de Inmueble: (1: Casa, 2: Apartamento, 0: Todos) "),
            TipoInmueble.TODOS,
        )
        self._imprimir("Publicaciones encontradas:")
        for dt in cp.listar_publicaciones(tipo, minimo, maximo, tipo_inmueble):
            self._imprimir(
                f"- Codigo: {dt.codigo}, fecha: {dt.fecha}, texto: {dt.texto}, "
                f"precio: {dt.precio}, inmobiliaria: {dt.inmobiliaria}"
            )
        if self._confirmar("Ver detalle de la publicacion: (1: Si, 0: No) "):
            codigo = self._entero("Codigo de publicacion: ")
            detalle = cp.detalle_inmueble_publicacion(codigo)
            if detalle is None:
                self._imprimir("No existe la publicacion.")
            else:
                self._imprimir("Detalle del inmueble:")
                self._imprimir(formatear_inmueble(detalle))

    def eliminar_inmueble(self) -> None:
        """Show a property and remove it after confirmation."""
        ci = self.sistema.controller_inmueble
        self._imprimir("Listado de inmuebles:")
        for dt in ci.listar_inmuebles():
            self._imprimir(
                f"- Codigo: {dt.codigo}, direccion: {dt.direccion}, propietario: {dt.propietario}"
            )
        codigo = self._entero("Codigo del inmueble a eliminar: ")
        detalle = ci.detalle_inmueble(codigo)
        if detalle is None:
            self._imprimir("No existe el inmueble.")
            return
        self._imprimir("Detalle del inmueble:")
        self._imprimir(formatear_inmueble(detalle))
        if self._confirmar("¿Desea eliminar?: (1: Si, 0: No) "):
            ci.eliminar_inmueble(codigo)
            self._imprimir("Inmueble eliminado.")

    def suscribirse_notificaciones(self) -> None:
        """Subscribe a user to agencies it is not yet subscribed to."""
        alta = self.sistema.alta_usuario
        nickname = self._preguntar("Nickname: ")
        if not isinstance(self.sistema.usuarios.buscar(nickname), Observador):
            self._imprimir("El usuario no puede suscribirse.")
            return
        try:
            self._listar_usuarios(
                "Inmobiliarias disponibles:", alta.listar_no_suscripciones(nickname)
            )
            alta.agregar_suscripciones(self._leer_nicknames())
        finally:
            alta.finalizar_alta_usuario()

    def consulta_notificaciones(self) -> None:
        """Show and discard a user's pending notifications."""
        nickname = self._preguntar("Nickname: ")
        try:
            notificaciones = self.sistema.alta_usuario.consultar_notificaciones(nickname)
        except (LookupError, TypeError) as error:
            self._imprimir(str(error))
            return
        if not notificaciones:
            self._imprimir("No hay notificaciones.")
        for n in notificaciones:
            self._imprimir(
                f"- Inmobiliaria: {n.inmobiliaria_nick}, Codigo: {n.codigo}, "
                f"Texto: {n.texto}, Tipo: {_ETIQUETA_PUBLICACION[n.tipo]}"
            )

    def eliminar_suscripciones(self) -> None:
        """Remove some of a user's subscriptions."""
        usuarios = self.sistema.usuarios
        suscriptor = usuarios.buscar(self._preguntar("Nickname: "))
        if not isinstance(suscriptor, Observador):
            self._imprimir("El usuario no recibe notificaciones.")
            return
        suscritas = sorted(
            u.datos()
            for u in usuarios
            if isinstance(u, Inmobiliaria) and u.esta_suscrito(suscriptor)
        )
        if not suscritas:
            self._imprimir("No tiene suscripciones.")
            return
        self._listar_usuarios("Suscripciones:", suscritas)
        for nickname in self._leer_nicknames():
            inmobiliaria = usuarios.buscar(nickname)
            if isinstance(inmobiliaria, Inmobiliaria):
                inmobiliaria.desuscribir(suscriptor)

    def alta_administracion_propiedad(self) -> None:
        """Make an agency manage a property it does not manage yet."""
        usuarios = self.sistema.usuarios
        self._listar_usuarios(
            "Lista de Inmobiliarias:", self.sistema.alta_usuario.listar_inmobiliarias()
        )
        inmobiliaria = usuarios.buscar(self._preguntar("Nickname de la inmobiliaria: "))
        if not isinstance(inmobiliaria, Inmobiliaria):
            self._imprimir("No existe la inmobiliaria.")
            return
        candidatos: dict[int, Inmueble] = {
            inmueble.codigo: inmueble
            for propietario in usuarios
            if isinstance(propietario, Propietario)
            for inmueble in propietario.inmuebles
            if inmobiliaria.administracion(inmueble.codigo) is None
        }
        for codigo, inmueble in sorted(candidatos.items()):
            dueno = inmueble.propietario.nickname if inmueble.propietario else ""
            self._imprimir(
                f"- Codigo: {codigo}, direccion: {inmueble.direccion}, propietario: {dueno}"
            )
        inmueble = candidatos.get(self._entero("Codigo del inmueble a administrar: "))
        if inmueble is None:
            self._imprimir("El inmueble no esta disponible.")
            return
        ap = AdministraPropiedad(
            self.sistema.fecha.fecha_actual(), inmobiliaria=inmobiliaria, inmueble=inmueble
        )
        inmobiliaria.administraciones.add(ap)
        inmueble.agregar_administracion(ap)
        self._imprimir("Administracion registrada.")

    def cargar_datos(self) -> None:
        """Load the sample data."""
        if self.sistema.cargar_datos():
            self._imprimir("Datos cargados.")
        else:
            self._imprimir("Los datos ya estaban cargados.")

    def ver_fecha_actual(self) -> None:
        """Print the system's current date."""
        self._imprimir(f"fecha actual: {self.sistema.fecha.fecha_actual()}")

    def asignar_fecha_actual(self) -> None:
        """Read a day, month and year and make it the current date."""
        dia = self._entero("dia: ")
        mes = self._entero("mes: ")
        anio = self._entero("ano: ")
        self.sistema.fecha.set_nueva_fecha(dia, mes, anio)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="gestion-inmobiliaria",
        description="Menu interactivo de gestion inmobiliaria.",
    )
    parser.parse_args(argv)
    return Menu().run()


if __name__ == "__main__":
    sys.exit(main())