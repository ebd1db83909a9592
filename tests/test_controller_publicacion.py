from types import SimpleNamespace

import pytest

from gestion_inmobiliaria.alta_usuario import AltaUsuario
from gestion_inmobiliaria.coleccion import ColeccionUsuario
from gestion_inmobiliaria.controller_inmueble import ControllerInmueble
from gestion_inmobiliaria.controller_publicacion import ControllerPublicacion
from gestion_inmobiliaria.datos import DTCasa, TipoInmueble, TipoPublicacion, TipoTecho
from gestion_inmobiliaria.fecha import ControladorFechaActual

VENTA = TipoPublicacion.VENTA
ALQUILER = TipoPublicacion.ALQUILER
TODOS = TipoInmueble.TODOS


@pytest.fixture
def s():
    coleccion = ColeccionUsuario()
    fecha = ControladorFechaActual()
    alta = AltaUsuario(coleccion, fecha)
    ci = ControllerInmueble(alta)
    alta.alta_propietario("prop", "password", "Prop", "p@example.com", "CTA-1", "000")
    casa = ci.alta_casa("Rivera", 10, 120, 1995, True, TipoTecho.PLANO)
    apto = ci.alta_apartamento("Brasil", 20, 70, 1980, 5, True, 3500.0)
    libre = ci.alta_casa("Libre", 1, 10, 2000, False, TipoTecho.LIVIANO)
    alta.finalizar_alta_usuario()
    alta.alta_inmobiliaria("inmo", "password", "Inmo SA", "i@example.com", "Dir", "web", "000")
    inmobiliaria = alta.usuario_temporal
    alta.representar_propietario("prop")
    alta.finalizar_alta_usuario()
    # the third property stays unmanaged
    inmobiliaria.administraciones.discard(inmobiliaria.administracion(libre))
    return SimpleNamespace(
        alta=alta,
        fecha=fecha,
        cp=ControllerPublicacion(coleccion, fecha),
        inmobiliaria=inmobiliaria,
        casa=casa,
        apto=apto,
        libre=libre,
    )


def test_codes_increase(s):
    primero = s.cp.actualizar_codigo_publicacion()
    assert s.cp.actualizar_codigo_publicacion() == primero + 1


def test_rejects_unknown_agency_or_property(s):
    assert not s.cp.alta_publicacion("nadie", s.casa, VENTA, "t", 1.0)
    assert not s.cp.alta_publicacion("prop", s.casa, VENTA, "t", 1.0)
    assert not s.cp.alta_publicacion("inmo", s.libre, VENTA, "t", 1.0)
    assert s.cp.listar_publicaciones(VENTA, 0, 10, TODOS) == []


def test_one_listing_per_type_per_day(s):
    assert s.cp.alta_publicacion("inmo", s.casa, VENTA, "primera", 100.0)
    assert not s.cp.alta_publicacion("inmo", s.casa, VENTA, "segunda", 200.0)
    assert s.cp.alta_publicacion("inmo", s.casa, ALQUILER, "alquiler", 20.0)
    ap = s.inmobiliaria.administracion(s.casa)
    assert ap.venta_activa.texto == "primera"
    assert ap.alquiler_activa.texto == "alquiler"


def test_newer_listing_replaces_active(s):
    s.cp.alta_publicacion("inmo", s.casa, VENTA, "vieja", 100.0)
    s.fecha.set_nueva_fecha(2, 1, 1900)
    assert s.cp.alta_publicacion("inmo", s.casa, VENTA, "nueva", 90.0)
    ap = s.inmobiliaria.administracion(s.casa)
    assert ap.venta_activa.texto == "nueva"
    vieja = next(p for p in ap.publicaciones if p.texto == "vieja")
    assert not vieja.activa


def test_older_listing_does_not_replace_active(s):
    s.fecha.set_nueva_fecha(10, 5, 2024)
    s.cp.alta_publicacion("inmo", s.casa, VENTA, "reciente", 100.0)
    s.fecha.set_nueva_fecha(1, 5, 2024)
    assert s.cp.alta_publicacion("inmo", s.casa, VENTA, "anterior", 90.0)
    ap = s.inmobiliaria.administracion(s.casa)
    assert ap.venta_activa.texto == "reciente"
    anterior = next(p for p in ap.publicaciones if p.texto == "anterior")
    assert not anterior.activa


def test_listar_filters(s):
    s.cp.alta_publicacion("inmo", s.casa, VENTA, "casa", 1500.0)
    s.cp.alta_publicacion("inmo", s.apto, VENTA, "apto", 800.0)
    s.cp.alta_publicacion("inmo", s.apto, ALQUILER, "renta", 50.0)
    textos = lambda lista: [d.texto for d in lista]  # noqa: E731
    assert textos(s.cp.listar_publicaciones(VENTA, 0, 2000, TODOS)) == ["casa", "apto"]
    assert textos(s.cp.listar_publicaciones(VENTA, 1000, 2000, TODOS)) == ["casa"]
    assert textos(s.cp.listar_publicaciones(VENTA, 0, 2000, TipoInmueble.CASA)) == ["casa"]
    assert textos(
        s.cp.listar_publicaciones(VENTA, 0, 2000, TipoInmueble.APARTAMENTO)
    ) == ["apto"]
    assert textos(s.cp.listar_publicaciones(ALQUILER, 0, 2000, TODOS)) == ["renta"]


def test_listed_data(s):
    s.fecha.set_nueva_fecha(5, 6, 2024)
    s.cp.alta_publicacion("inmo", s.casa, VENTA, "casa", 1500.0)
    (dato,) = s.cp.listar_publicaciones(VENTA, 0, 2000, TODOS)
    assert dato.precio == "1500"
    assert dato.inmobiliaria == "Inmo SA"
    assert dato.fecha == s.fecha.fecha_actual()


def test_detalle_inmueble_publicacion(s):
    s.cp.alta_publicacion("inmo", s.casa, VENTA, "casa", 1500.0)
    (dato,) = s.cp.listar_publicaciones(VENTA, 0, 2000, TODOS)
    assert s.cp.detalle_inmueble_publicacion(dato.codigo) == DTCasa(
        s.casa, "Rivera", 10, 120, 1995, True, TipoTecho.PLANO
    )
    assert s.cp.detalle_inmueble_publicacion(dato.codigo + 50) is None


def test_subscribers_are_notified(s):
    s.alta.alta_cliente("cli", "password", "C", "c@example.com", "A", "DOC")
    s.alta.listar_no_suscripciones("cli")
    s.alta.agregar_suscripciones(["inmo"])
    s.cp.alta_publicacion("inmo", s.casa, ALQUILER, "aviso", 30.0)
    (aviso,) = s.alta.consultar_notificaciones("cli")
    assert (aviso.inmobiliaria_nick, aviso.texto, aviso.tipo) == ("inmo", "aviso", ALQUILER)