from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.definiciones import ENTIDAD_CLIENTE, REEMBOLSO
from app.application.servicio_entidad import ServicioEntidad
from app.config.database import get_db
from app.config.settings import get_transiciones_estrictas
from app.domain.constants import TRANSICION_REVOCAR, TRANSICION_VALIDAR
from app.domain.esquemas import ReembolsoActualizacion, ReembolsoCrear
from app.infrastructure.repositorio_clientes import RepositorioClientes
from app.infrastructure.repositorio_reembolsos import RepositorioReembolsos
from app.utils.error_handlers import ejecutar_operacion

router = APIRouter(prefix="/api/reembolsos", tags=["Reembolsos"])


def get_servicio(db: Session = Depends(get_db)) -> ServicioEntidad:
    return ServicioEntidad(
        REEMBOLSO,
        RepositorioReembolsos(db),
        referencias={ENTIDAD_CLIENTE: RepositorioClientes(db)},
        estricto=get_transiciones_estrictas(),
    )


@router.get("")
def listar_reembolsos(servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        servicio.listar,
        mensaje_exito="Reembolsos obtenidos correctamente",
        mensaje_error="Error al obtener reembolsos",
    )


@router.get("/cliente/{id_cliente}")
def listar_reembolsos_cliente(id_cliente: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.listar_por_cliente(id_cliente),
        mensaje_exito="Reembolsos del cliente obtenidos correctamente",
        mensaje_error="Error al obtener reembolsos del cliente",
    )


@router.get("/{id}")
def obtener_reembolso(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.obtener(id),
        mensaje_exito="Reembolso obtenido correctamente",
        mensaje_error="Error al obtener reembolso",
    )


@router.post("")
def crear_reembolso(payload: ReembolsoCrear, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.crear(payload),
        mensaje_exito="Reembolso creado correctamente",
        mensaje_error="Error al crear reembolso",
        status_exito=status.HTTP_201_CREATED,
    )


@router.put("/{id}")
def actualizar_reembolso(id: str, payload: Optional[ReembolsoActualizacion] = None, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.actualizar(id, payload or ReembolsoActualizacion()),
        mensaje_exito="Reembolso actualizado correctamente",
        mensaje_error="Error al actualizar reembolso",
    )


# Los clientes antiguos usan PUT para estas transiciones
@router.api_route("/{id}/validate", methods=["PATCH", "PUT"])
def validar_reembolso(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_VALIDAR),
        mensaje_exito="Reembolso validado correctamente",
        mensaje_error="Error al validar reembolso",
    )


@router.api_route("/{id}/revoke", methods=["PATCH", "PUT"])
def revocar_reembolso(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_REVOCAR),
        mensaje_exito="Reembolso revocado correctamente",
        mensaje_error="Error al revocar reembolso",
    )
