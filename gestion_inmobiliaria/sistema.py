"""The system: one set of controllers sharing the same users and date."""

from __future__ import annotations

from .alta_usuario import AltaUsuario
from .coleccion import ColeccionUsuario
from .controller_inmueble import ControllerInmueble
from .controller_publicacion import ControllerPublicacion
from .datos import TipoPublicacion, TipoTecho
from .fecha import ControladorFechaActual


class Sistema:
    """Builds the controllers and wires them to shared state."""

    def __init__(self) -> None:
        self.usuarios = ColeccionUsuario()
        self.fecha = ControladorFechaActual()
        self.alta_usuario = AltaUsuario(self.usuarios, self.fecha)
        self.controller_inmueble = ControllerInmueble(self.alta_usuario)
        self.controller_publicacion = ControllerPublicacion(self.usuarios, self.fecha)
        self.datos_cargados = False

    def cargar_datos(self) -> bool:
        """Load the sample data once; return False if it was already loaded."""
        if self.datos_cargados:
            return False
        alta = self.alta_usuario
        ci = self.controller_inmueble

        alta.alta_cliente(
            "luisito23", "password", "Luis", "luisito23@example.com", "Perez", "DOC-0001"
        )
        alta.alta_cliente(
            "anarojo88", "password", "Ana", "anarojo88@example.com", "Rojo", "DOC-0002"
        )

        codigos: dict[str, int] = {}
        if alta.alta_propietario(
            "marcelom", "password", "Marcelo", "marcelom@example.com", "CTA-0001", "000"
        ):
            codigos["rivera"] = ci.alta_casa(
                "Av. Rivera", 1011, 120, 1995, True, TipoTecho.A_DOS_AGUAS
            )
            codigos["brasil"] = ci.alta_apartamento(
                "Av. Brasil", 2031, 75, 1980, 5, True, 3500.0
            )
        alta.finalizar_alta_usuario()
        if alta.alta_propietario(
            "robertarce", "password", "Roberto", "robertarce@example.com", "CTA-0002", "000"
        ):
            codigos["maldonado"] = ci.alta_casa(
                "Camino Maldonado", 1540, 200, 1960, False, TipoTecho.PLANO
            )
        alta.finalizar_alta_usuario()

        agencias = [
            ("casasur", "Casa Sur", "Canelones 2345", ["marcelom"]),
            ("idealhome", "Ideal Home", "Av. Italia 4567", ["robertarce", "marcelom"]),
        ]
        for nick, nombre, direccion, representados in agencias:
            if alta.alta_inmobiliaria(
                nick, "password", nombre, f"{nick}@example.com", direccion, f"{nick}.example.com", "000"
            ):
                for propietario in representados:
                    alta.representar_propietario(propietario)
            alta.finalizar_alta_usuario()

        for cliente, suscripciones in [
            ("luisito23", ["casasur", "idealhome"]),
            ("anarojo88", ["idealhome"]),
        ]:
            alta.listar_no_suscripciones(cliente)
            alta.agregar_suscripciones(suscripciones)
            alta.finalizar_alta_usuario()

        publicaciones = [
            ("casasur", "rivera", TipoPublicacion.VENTA, "Casa luminosa con fondo", 190000.0),
            ("idealhome", "brasil", TipoPublicacion.ALQUILER, "Apartamento con vista", 28000.0),
            ("idealhome", "maldonado", TipoPublicacion.VENTA, "Casa amplia de campo", 300000.0),
        ]
        for nick, clave, tipo, texto, precio in publicaciones:
            if clave in codigos:
                self.controller_publicacion.alta_publicacion(
                    nick, codigos[clave], tipo, texto, precio
                )

        self.datos_cargados = True
        return True