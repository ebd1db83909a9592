[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gestion_inmobiliaria"
version = "0.1.0"
description = "Gestión de usuarios, inmuebles, administraciones y publicaciones inmobiliarias desde un menú de consola"
requires-python = ">=3.10"
dependencies = []
keywords = ["inmobiliaria", "inmuebles", "publicaciones", "propietarios", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gestion-inmobiliaria = "gestion_inmobiliaria.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["gestion_inmobiliaria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
