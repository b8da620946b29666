from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.definiciones import CLIENTE
from app.application.servicio_entidad import ServicioEntidad
from app.config.database import get_db
from app.config.settings import get_transiciones_estrictas
from app.domain.constants import TRANSICION_ALTERNAR
from app.domain.esquemas import ClienteActualizacion, ClienteCrear
from app.infrastructure.repositorio_clientes import RepositorioClientes
from app.utils.error_handlers import ejecutar_operacion

router = APIRouter(prefix="/api/clientes", tags=["Clientes"])


def get_servicio(db: Session = Depends(get_db)) -> ServicioEntidad:
    return ServicioEntidad(CLIENTE, RepositorioClientes(db), estricto=get_transiciones_estrictas())


def _mensaje_cambio_estado(cliente: Dict[str, Any]) -> str:
    return f"Estado del cliente cambiado a {'activo' if cliente['activo'] else 'inactivo'} correctamente"


@router.get("")
def listar_clientes(servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        servicio.listar,
        mensaje_exito="Clientes obtenidos correctamente",
        mensaje_error="Error al obtener clientes",
    )


@router.get("/correo/{correo}")
def obtener_cliente_por_correo(correo: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.obtener_por_unico(correo),
        mensaje_exito="Cliente obtenido correctamente",
        mensaje_error="Error al obtener cliente",
    )


@router.get("/{id}")
def obtener_cliente(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.obtener(id),
        mensaje_exito="Cliente obtenido correctamente",
        mensaje_error="Error al obtener cliente",
    )


@router.post("")
def crear_cliente(payload: ClienteCrear, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.crear(payload),
        mensaje_exito="Cliente creado correctamente",
        mensaje_error="Error al crear cliente",
        status_exito=status.HTTP_201_CREATED,
    )


@router.put("/{id}")
def actualizar_cliente(id: str, payload: Optional[ClienteActualizacion] = None, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.actualizar(id, payload or ClienteActualizacion()),
        mensaje_exito="Cliente actualizado correctamente",
        mensaje_error="Error al actualizar cliente",
    )


@router.patch("/{id}")
def cambiar_estado_cliente(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    """Alterna activo/inactivo; al desactivar registra canceledAt."""
    return ejecutar_operacion(
        lambda: servicio.transicionar(id, TRANSICION_ALTERNAR),
        mensaje_exito=_mensaje_cambio_estado,
        mensaje_error="Error al cambiar estado del cliente",
    )


@router.delete("/{id}")
def cancelar_cliente(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.eliminar(id),
        mensaje_exito="Cliente cancelado correctamente",
        mensaje_error="Error al cancelar cliente",
    )
