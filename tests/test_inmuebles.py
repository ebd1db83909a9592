from gestion_inmobiliaria.administracion import AdministraPropiedad
from gestion_inmobiliaria.datos import DTApartamento, DTCasa, DTInmueble, TipoTecho
from gestion_inmobiliaria.fecha import Fecha
from gestion_inmobiliaria.inmuebles import Apartamento, Casa, Inmueble


def test_casa_detalle_reflects_fields():
    casa = Casa(1, "Rivera", 1234, 120, 1990, True, TipoTecho.PLANO)
    detalle = casa.detalle()
    assert isinstance(detalle, DTCasa)
    assert detalle == DTCasa(1, "Rivera", 1234, 120, 1990, True, TipoTecho.PLANO)


def test_apartamento_detalle_reflects_fields():
    apto = Apartamento(2, "Brasil", 55, 70, 2005, 3, False, 2500.5)
    detalle = apto.detalle()
    assert isinstance(detalle, DTApartamento)
    assert detalle.piso == 3
    assert detalle.tiene_ascensor is False
    assert detalle.gastos_comunes == 2500.5
    assert detalle.direccion == "Brasil"


def test_base_inmueble_detalle():
    inmueble = Inmueble(3, "Sarandi", 10, 50, 1950)
    assert inmueble.detalle() == DTInmueble(3, "Sarandi", 10, 50, 1950)


def test_new_inmueble_has_no_owner_or_management():
    casa = Casa(1, "Rivera", 1, 1, 2000, False, TipoTecho.LIVIANO)
    assert casa.propietario is None
    assert casa.administraciones == set()


def test_agregar_administracion_is_idempotent():
    casa = Casa(1, "Rivera", 1, 1, 2000, False, TipoTecho.LIVIANO)
    ap = AdministraPropiedad(Fecha(1, 1, 2020), inmueble=casa)
    casa.agregar_administracion(ap)
    casa.agregar_administracion(ap)
    assert casa.administraciones == {ap}


def test_inmuebles_compare_by_identity():
    a = Casa(1, "Rivera", 1, 1, 2000, False, TipoTecho.LIVIANO)
    b = Casa(1, "Rivera", 1, 1, 2000, False, TipoTecho.LIVIANO)
    assert a != b
    assert len({a, b}) == 2