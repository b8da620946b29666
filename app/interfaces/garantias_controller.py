from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.definiciones import ENTIDAD_CLIENTE, ENTIDAD_SUBASTA, GARANTIA
from app.application.reenviar_garantia import ReenviarGarantia
from app.application.servicio_entidad import ServicioEntidad
from app.config.database import get_db
from app.config.settings import get_transiciones_estrictas
from app.domain.constants import (
    TRANSICION_ENVIAR,
    TRANSICION_INVALIDAR,
    TRANSICION_PAGAR,
    TRANSICION_REVOCAR,
    TRANSICION_VALIDAR,
)
from app.domain.esquemas import GarantiaActualizacion, GarantiaCrear, GarantiaReenvio
from app.infrastructure.repositorio_clientes import RepositorioClientes
from app.infrastructure.repositorio_garantias import RepositorioGarantias
from app.infrastructure.repositorio_subastas import RepositorioSubastas
from app.utils.error_handlers import ejecutar_operacion

router = APIRouter(prefix="/api/garantias", tags=["Garantías"])


def get_servicio(db: Session = Depends(get_db)) -> ServicioEntidad:
    return ServicioEntidad(
        GARANTIA,
        RepositorioGarantias(db),
        referencias={
            ENTIDAD_CLIENTE: RepositorioClientes(db),
            ENTIDAD_SUBASTA: RepositorioSubastas(db),
        },
        estricto=get_transiciones_estrictas(),
    )


@router.get("")
def listar_garantias(servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        servicio.listar,
        mensaje_exito="Garantías obtenidas correctamente",
        mensaje_error="Error al obtener garantías",
    )


@router.get("/cliente/{id_cliente}")
def listar_garantias_cliente(id_cliente: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.listar_por_cliente(id_cliente),
        mensaje_exito="Garantías del cliente obtenidas correctamente",
        mensaje_error="Error al obtener garantías del cliente",
    )


@router.get("/{id}")
def obtener_garantia(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.obtener(id),
        mensaje_exito="Garantía obtenida correctamente",
        mensaje_error="Error al obtener garantía",
    )


@router.post("")
def crear_garantia(payload: GarantiaCrear, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.crear(payload),
        mensaje_exito="Garantía creada correctamente",
        mensaje_error="Error al crear garantía",
        status_exito=status.HTTP_201_CREATED,
    )


@router.put("/{id}")
def actualizar_garantia(id: str, payload: Optional[GarantiaActualizacion] = None, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.actualizar(id, payload or GarantiaActualizacion()),
        mensaje_exito="Garantía actualizada correctamente",
        mensaje_error="Error al actualizar garantía",
    )


@router.put("/{id}/cliente")
def reenviar_garantia(id: str, payload: Optional[GarantiaReenvio] = None, servicio: ServicioEntidad = Depends(get_servicio)):
    """Corrección de datos de depósito por el cliente; vuelve a PV."""
    return ejecutar_operacion(
        lambda: ReenviarGarantia(servicio).execute(id, payload or GarantiaReenvio()),
        mensaje_exito="Garantía reenviada correctamente",
        mensaje_error="Error al reenviar garantía",
    )


@router.patch("/{id}/validate")
def validar_garantia(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_VALIDAR),
        mensaje_exito="Garantía validada correctamente",
        mensaje_error="Error al validar garantía",
    )


@router.patch("/{id}/invalid")
def invalidar_garantia(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_INVALIDAR),
        mensaje_exito="Garantía invalidada correctamente",
        mensaje_error="Error al invalidar garantía",
    )


@router.patch("/{id}/revoke")
def revocar_garantia(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_REVOCAR),
        mensaje_exito="Garantía revocada correctamente",
        mensaje_error="Error al revocar garantía",
    )


@router.patch("/{id}/paid")
def pagar_garantia(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_PAGAR),
        mensaje_exito="Garantía marcada como pagada correctamente",
        mensaje_error="Error al marcar garantía como pagada",
    )


@router.patch("/{id}/sent")
def enviar_garantia(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_ENVIAR),
        mensaje_exito="Garantía marcada como enviada correctamente",
        mensaje_error="Error al marcar garantía como enviada",
    )


@router.delete("/{id}")
def cancelar_garantia(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.eliminar(id),
        mensaje_exito="Garantía cancelada correctamente",
        mensaje_error="Error al cancelar garantía",
    )
