#!/usr/bin/env python3
"""Script CLI para crear las tablas de la API de subastas y cargar datos de ejemplo."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv


def _configure_paths() -> None:
    """Añade la raíz del backend al `sys.path` para importar `app.*`."""
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_configure_paths()

from app.application.definiciones import CLIENTE, SUBASTA, USUARIO  # noqa: E402
from app.application.servicio_entidad import ServicioEntidad  # noqa: E402
from app.config.database import Base, SessionLocal, check_connection, init_db  # noqa: E402
from app.domain.esquemas import ClienteCrear, SubastaCrear, UsuarioCrear  # noqa: E402
from app.domain.resultado import es_error  # noqa: E402
from app.infrastructure.repositorio_clientes import RepositorioClientes  # noqa: E402
from app.infrastructure.repositorio_subastas import RepositorioSubastas  # noqa: E402
from app.infrastructure.repositorio_usuarios import RepositorioUsuarios  # noqa: E402
from app.infrastructure import repositorio_facturacion, repositorio_garantias, repositorio_reembolsos  # noqa: E402,F401

DATOS_DEMO = [
    (CLIENTE, RepositorioClientes, ClienteCrear, {
        "correo": "demo@subastas.pe",
        "nombreCompleto": "Cliente Demo",
        "tipDocumento": "DNI",
        "numDocumento": "12345678",
        "numCelular": "999888777",
    }),
    (SUBASTA, RepositorioSubastas, SubastaCrear, {
        "titulo": "Subasta de prueba",
        "placaVehiculo": "ABC-123",
        "empresa": "Empresa Demo",
        "fecha": "2026-01-15",
        "moneda": "USD",
        "monto": 1500,
    }),
    (USUARIO, RepositorioUsuarios, UsuarioCrear, {
        "email": "admin@subastas.pe",
        "nombre": "Administrador",
        "tipo_usuario": "admin",
    }),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Crea las tablas de la base de datos configurada."
    )
    parser.add_argument(
        "--verificar",
        action="store_true",
        help="Solo comprobar la conexión con la base de datos (no crea tablas).",
    )
    parser.add_argument(
        "--datos-demo",
        action="store_true",
        help="Insertar un cliente, una subasta y un usuario de ejemplo tras crear las tablas.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        help="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    return parser.parse_args()


def cargar_datos_demo() -> int:
    """Inserta los registros de ejemplo; los que ya existen se omiten."""
    db = SessionLocal()
    creados = 0
    try:
        for definicion, repositorio, modelo, datos in DATOS_DEMO:
            entrada = modelo.model_validate(datos)
            resultado = ServicioEntidad(definicion, repositorio(db)).crear(entrada)
            if es_error(resultado):
                logging.info("%s omitido: %s", definicion.nombre, resultado.mensaje)
                continue
            logging.info("%s creado con ID %s", definicion.nombre, resultado.valor["id"])
            creados += 1
    finally:
        db.close()
    return creados


def main() -> int:
    load_dotenv()
    args = parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    if not check_connection():
        logging.error("No hay conexión con la base de datos")
        return 1
    if args.verificar:
        logging.info("Conexión con la base de datos correcta")
        return 0

    try:
        init_db(Base.metadata)
    except Exception:
        logging.exception("Error creando las tablas")
        return 1
    logging.info("Tablas creadas: %s", ", ".join(sorted(Base.metadata.tables)))

    if args.datos_demo:
        creados = cargar_datos_demo()
        logging.info("Registros de ejemplo creados: %s", creados)
    return 0


if __name__ == "__main__":
    sys.exit(main())
