from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.definiciones import SUBASTA
from app.application.servicio_entidad import ServicioEntidad
from app.config.database import get_db
from app.config.settings import get_transiciones_estrictas
from app.domain.constants import TRANSICION_CERRAR
from app.domain.esquemas import SubastaActualizacion, SubastaCrear
from app.infrastructure.repositorio_subastas import RepositorioSubastas
from app.utils.error_handlers import ejecutar_operacion

router = APIRouter(prefix="/api/subastas", tags=["Subastas"])


def get_servicio(db: Session = Depends(get_db)) -> ServicioEntidad:
    return ServicioEntidad(SUBASTA, RepositorioSubastas(db), estricto=get_transiciones_estrictas())


@router.get("")
def listar_subastas(servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        servicio.listar,
        mensaje_exito="Subastas obtenidas correctamente",
        mensaje_error="Error al obtener subastas",
    )


@router.get("/{id}")
def obtener_subasta(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.obtener(id),
        mensaje_exito="Subasta obtenida correctamente",
        mensaje_error="Error al obtener subasta",
    )


@router.post("")
def crear_subasta(payload: SubastaCrear, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.crear(payload),
        mensaje_exito="Subasta creada correctamente",
        mensaje_error="Error al crear subasta",
        status_exito=status.HTTP_201_CREATED,
    )


@router.put("/{id}")
def actualizar_subasta(id: str, payload: Optional[SubastaActualizacion] = None, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.actualizar(id, payload or SubastaActualizacion()),
        mensaje_exito="Subasta actualizada correctamente",
        mensaje_error="Error al actualizar subasta",
    )


@router.patch("/{id}/close")
def cerrar_subasta(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_CERRAR),
        mensaje_exito="Subasta cerrada correctamente",
        mensaje_error="Error al cerrar subasta",
    )


@router.delete("/{id}")
def cancelar_subasta(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    """Marca la subasta como CANCELADA en lugar de eliminarla."""
    return ejecutar_operacion(
        lambda: servicio.eliminar(id),
        mensaje_exito="Subasta cancelada correctamente",
        mensaje_error="Error al cancelar subasta",
    )
