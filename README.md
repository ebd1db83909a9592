# gestion_inmobiliaria

Sistema de gestión inmobiliaria que se usa desde un menú de consola. Con él se puede:

- dar de alta clientes, propietarios e inmobiliarias;
- registrar casas y apartamentos de un propietario mientras se lo da de alta;
- hacer que una inmobiliaria represente a propietarios (administra todos sus inmuebles) o que administre un inmueble concreto;
- crear publicaciones de venta o de alquiler y consultarlas con filtros de precio y tipo de inmueble;
- eliminar inmuebles, junto con sus administraciones y publicaciones;
- suscribir clientes y propietarios a las notificaciones de una inmobiliaria, consultarlas y eliminar suscripciones;
- ver y cambiar la fecha actual del sistema. La fecha inicial es 1/1/1900.

No usa bibliotecas fuera de la biblioteca estándar.

## Instalación

```
pip install .
```

Para correr las pruebas:

```
pip install ".[test]"
pytest
```

## Uso

```
gestion-inmobiliaria
```

El programa muestra el menú de operaciones y pide un código:

```
=== Menu de Operaciones ===
1. Alta de usuario
2. Alta de publicacion
3. Consulta de publicaciones
4. Eliminar inmueble
5. Suscribirse a notificaciones
6. Consultar notificaciones
7. Eliminar suscripciones
8. Alta administracion de propiedad
9. Cargar datos
10. Ver fecha actual
11. Asignar fecha actual
0. Salir
Ingrese el codigo de operacion:
```

Cada opción pide sus datos línea a línea. La opción `0` o el fin de la entrada terminan el programa. Si un dato numérico no se puede leer, se muestra `Entrada no valida.` y se vuelve al menú.

Algunos detalles de las operaciones:

- **Alta de usuario**: tras crear una inmobiliaria se pueden indicar, uno a uno, los propietarios que representa; tras crear un propietario se pueden ingresar sus casas y apartamentos. Un nickname ya usado se rechaza.
- **Alta de publicacion**: se rechaza si la inmobiliaria no existe, si no administra el inmueble o si ya publicó ese mismo día una publicación del mismo tipo para él. Cada administración tiene a lo sumo una publicación activa de venta y una de alquiler; la nueva pasa a ser la activa cuando la anterior es de una fecha previa. Al publicar, la inmobiliaria notifica a sus suscriptores.
- **Suscribirse a notificaciones** y **Eliminar suscripciones**: se lee un nickname de inmobiliaria por línea hasta una línea vacía.
- **Consultar notificaciones**: muestra las notificaciones pendientes del usuario y las borra.
- **Cargar datos**: carga un conjunto de datos de ejemplo (clientes `luisito23` y `anarojo88`, propietarios `marcelom` y `robertarce`, inmobiliarias `casasur` e `idealhome`, con inmuebles, suscripciones y publicaciones). Solo se cargan una vez.

## Uso como biblioteca

La clase `Sistema` del módulo `gestion_inmobiliaria.sistema` crea los controladores y los conecta al mismo conjunto de usuarios y a la misma fecha:

- `Sistema.alta_usuario`: un `AltaUsuario` (`gestion_inmobiliaria.alta_usuario`) para altas, listados, representación de propietarios, suscripciones y notificaciones;
- `Sistema.controller_inmueble`: un `ControllerInmueble` (`gestion_inmobiliaria.controller_inmueble`) para alta, listado, detalle y eliminación de inmuebles;
- `Sistema.controller_publicacion`: un `ControllerPublicacion` (`gestion_inmobiliaria.controller_publicacion`) para alta, consulta y detalle de publicaciones;
- `Sistema.fecha`: un `ControladorFechaActual` (`gestion_inmobiliaria.fecha`) para la fecha actual;
- `Sistema.usuarios`: la `ColeccionUsuario` (`gestion_inmobiliaria.coleccion`) con todos los usuarios.

```python
from gestion_inmobiliaria.datos import TipoInmueble, TipoPublicacion
from gestion_inmobiliaria.sistema import Sistema

sistema = Sistema()
sistema.cargar_datos()
for dt in sistema.controller_publicacion.listar_publicaciones(
    TipoPublicacion.VENTA, 0, 1_000_000, TipoInmueble.TODOS
):
    print(dt.codigo, dt.fecha, dt.texto, dt.precio, dt.inmobiliaria)
```

Los resultados de las consultas son objetos de datos inmutables del módulo `gestion_inmobiliaria.datos`, por ejemplo `DTUsuario`, `DTPublicacion`, `DTInmuebleListado`, `DTCasa` y `DTApartamento`. Los listados vienen ordenados por nickname o por código.

`ControllerInmueble.alta_casa` y `alta_apartamento` crean el inmueble para el propietario que se está dando de alta y lanzan `ValueError` si no hay ninguno; `eliminar_inmueble` lanza `KeyError` si el código no existe. `AltaUsuario.consultar_notificaciones` lanza `LookupError` si el usuario no existe y `TypeError` si no recibe notificaciones.

## Lo que no hace

Los datos viven solo en memoria: no hay almacenamiento, y todo lo ingresado se pierde al salir del programa. Los usuarios no inician sesión; la contraseña se guarda pero nunca se verifica.