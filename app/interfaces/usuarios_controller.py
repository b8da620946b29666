from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.definiciones import USUARIO
from app.application.servicio_entidad import ServicioEntidad
from app.config.database import get_db
from app.domain.esquemas import UsuarioActualizacion, UsuarioCrear
from app.infrastructure.repositorio_usuarios import RepositorioUsuarios
from app.utils.error_handlers import ejecutar_operacion

router = APIRouter(prefix="/api/users", tags=["Usuarios"])


def get_servicio(db: Session = Depends(get_db)) -> ServicioEntidad:
    return ServicioEntidad(USUARIO, RepositorioUsuarios(db))


@router.get("")
def listar_usuarios(servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        servicio.listar,
        mensaje_exito="Usuarios obtenidos correctamente",
        mensaje_error="Error al obtener usuarios",
    )


@router.get("/{id}")
def obtener_usuario(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.obtener(id),
        mensaje_exito="Usuario obtenido correctamente",
        mensaje_error="Error al obtener usuario",
    )


@router.post("")
def crear_usuario(payload: UsuarioCrear, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.crear(payload),
        mensaje_exito="Usuario creado correctamente",
        mensaje_error="Error al crear usuario",
        status_exito=status.HTTP_201_CREATED,
    )


@router.put("/{id}")
def actualizar_usuario(id: str, payload: Optional[UsuarioActualizacion] = None, servicio: ServicioEntidad = Depends(get_servicio)):
    return ejecutar_operacion(
        lambda: servicio.actualizar(id, payload or UsuarioActualizacion()),
        mensaje_exito="Usuario actualizado correctamente",
        mensaje_error="Error al actualizar usuario",
    )


@router.delete("/{id}")
def eliminar_usuario(id: str, servicio: ServicioEntidad = Depends(get_servicio)):
    """Borrado físico: el usuario desaparece de la base de datos."""
    return ejecutar_operacion(
        lambda: servicio.eliminar(id),
        mensaje_exito="Usuario eliminado correctamente",
        mensaje_error="Error al eliminar usuario",
    )
