"""Gestión de usuarios, inmuebles, administraciones y publicaciones inmobiliarias."""

__version__ = "0.1.0"