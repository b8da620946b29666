from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.definiciones import ENTIDAD_CLIENTE, ENTIDAD_SUBASTA, FACTURACION
from app.application.servicio_entidad import ServicioEntidad
from app.config.database import get_db
from app.config.settings import get_transiciones_estrictas
from app.domain.constants import TRANSICION_REVOCAR, TRANSICION_VALIDAR
from app.domain.esquemas import FacturacionActualizacion, FacturacionCrear
from app.infrastructure.repositorio_clientes import RepositorioClientes
from app.infrastructure.repositorio_facturacion import RepositorioFacturacion
from app.infrastructure.repositorio_subastas import RepositorioSubastas
from app.utils.error_handlers import ejecutar_operacion

router = APIRouter(prefix="/api/facturacion", tags=["Facturación"])


def get_servicio(db: Session = Depends(get_db)) -> ServicioEntidad:
    return ServicioEntidad(
        FACTURACION,
        RepositorioFacturacion(db),
        referencias={
            ENTIDAD_CLIENTE: RepositorioClientes(db),
            ENTIDAD_SUBASTA: RepositorioSubastas(db),
        },
        estricto=get_transiciones_estrictas(),
    )


@router.get("")
def listar_facturaciones(servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        servicio.listar,
        mensaje_exito="Facturaciones obtenidas correctamente",
        mensaje_error="Error al obtener facturaciones",
    )


@router.get("/cliente/{id_cliente}")
def listar_facturaciones_cliente(id_cliente: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.listar_por_cliente(id_cliente),
        mensaje_exito="Facturaciones del cliente obtenidas correctamente",
        mensaje_error="Error al obtener facturaciones del cliente",
    )


@router.get("/{id}")
def obtener_facturacion(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.obtener(id),
        mensaje_exito="Facturación obtenida correctamente",
        mensaje_error="Error al obtener facturación",
    )


@router.post("")
def crear_facturacion(payload: FacturacionCrear, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.crear(payload),
        mensaje_exito="Facturación creada correctamente",
        mensaje_error="Error al crear facturación",
        status_exito=status.HTTP_201_CREATED,
    )


@router.put("/{id}")
def actualizar_facturacion(id: str, payload: Optional[FacturacionActualizacion] = None, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.actualizar(id, payload or FacturacionActualizacion()),
        mensaje_exito="Facturación actualizada correctamente",
        mensaje_error="Error al actualizar facturación",
    )


@router.patch("/{id}/validate")
def validar_facturacion(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_VALIDAR),
        mensaje_exito="Facturación validada correctamente",
        mensaje_error="Error al validar facturación",
    )


@router.patch("/{id}/revoke")
def revocar_facturacion(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_REVOCAR),
        mensaje_exito="Facturación revocada correctamente",
        mensaje_error="Error al revocar facturación",
    )
