from types import SimpleNamespace

import pytest

from gestion_inmobiliaria.alta_usuario import AltaUsuario
from gestion_inmobiliaria.coleccion import ColeccionUsuario
from gestion_inmobiliaria.controller_inmueble import ControllerInmueble
from gestion_inmobiliaria.controller_publicacion import ControllerPublicacion
from gestion_inmobiliaria.datos import DTApartamento, DTCasa, TipoPublicacion, TipoTecho
from gestion_inmobiliaria.fecha import ControladorFechaActual


@pytest.fixture
def s():
    coleccion = ColeccionUsuario()
    fecha = ControladorFechaActual()
    alta = AltaUsuario(coleccion, fecha)
    return SimpleNamespace(
        alta=alta,
        ci=ControllerInmueble(alta),
        cp=ControllerPublicacion(coleccion, fecha),
    )


def _nuevo_propietario(s, nick="prop"):
    s.alta.alta_propietario(nick, "password", "Prop", "p@example.com", "CTA-1", "000")
    return s.alta.usuario_temporal


def test_codes_increase(s):
    primero = s.ci.actualizar_codigo_inmueble()
    segundo = s.ci.actualizar_codigo_inmueble()
    assert segundo == primero + 1


def test_alta_without_landlord_raises(s):
    with pytest.raises(ValueError):
        s.ci.alta_casa("Dir", 1, 50, 2000, False, TipoTecho.PLANO)
    s.alta.alta_cliente("cli", "password", "C", "c@example.com", "A", "DOC")
    with pytest.raises(ValueError):
        s.ci.alta_apartamento("Dir", 1, 50, 2000, 3, True, 100.0)


def test_alta_links_owner_and_lists(s):
    propietario = _nuevo_propietario(s)
    c1 = s.ci.alta_casa("Rivera", 10, 120, 1995, True, TipoTecho.A_DOS_AGUAS)
    c2 = s.ci.alta_apartamento("Brasil", 20, 70, 1980, 5, True, 3500.0)
    assert c1 != c2
    assert {i.codigo for i in propietario.inmuebles} == {c1, c2}
    listado = s.ci.listar_inmuebles()
    assert [(d.codigo, d.direccion, d.propietario) for d in listado] == [
        (c1, "Rivera", "prop"),
        (c2, "Brasil", "prop"),
    ]


def test_detalle_inmueble(s):
    _nuevo_propietario(s)
    c1 = s.ci.alta_casa("Rivera", 10, 120, 1995, True, TipoTecho.A_DOS_AGUAS)
    c2 = s.ci.alta_apartamento("Brasil", 20, 70, 1980, 5, False, 3500.0)
    assert s.ci.detalle_inmueble(c1) == DTCasa(
        c1, "Rivera", 10, 120, 1995, True, TipoTecho.A_DOS_AGUAS
    )
    assert s.ci.detalle_inmueble(c2) == DTApartamento(
        c2, "Brasil", 20, 70, 1980, 5, False, 3500.0
    )
    assert s.ci.detalle_inmueble(c2 + 100) is None


def test_eliminar_unknown_raises(s):
    with pytest.raises(KeyError):
        s.ci.eliminar_inmueble(42)


def test_eliminar_removes_everything(s):
    propietario = _nuevo_propietario(s)
    codigo = s.ci.alta_casa("Rivera", 10, 120, 1995, True, TipoTecho.PLANO)
    s.alta.finalizar_alta_usuario()
    s.alta.alta_inmobiliaria("inmo", "password", "Inmo", "i@example.com", "Dir", "web", "000")
    inmobiliaria = s.alta.usuario_temporal
    s.alta.representar_propietario("prop")
    assert s.cp.alta_publicacion("inmo", codigo, TipoPublicacion.VENTA, "venta", 100.0)

    s.ci.eliminar_inmueble(codigo)

    assert s.ci.listar_inmuebles() == []
    assert s.ci.detalle_inmueble(codigo) is None
    assert propietario.inmuebles == set()
    assert inmobiliaria.administraciones == set()
    assert inmobiliaria.administracion(codigo) is None
    assert s.cp.listar_publicaciones(
        TipoPublicacion.VENTA, 0, 1000, s.cp_tipo_todos if False else _todos()
    ) == []


def _todos():
    from gestion_inmobiliaria.datos import TipoInmueble

    return TipoInmueble.TODOS