"""
Sobre JSON uniforme de todas las respuestas de la API.
"""
from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class RespuestaApi(BaseModel):
    """Esquema base para respuestas de la API"""
    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[str] = None


def construir_sobre(success: bool, message: str, data: Any = None, error: Optional[str] = None) -> dict:
    """
    Construye el cuerpo del sobre.

    `data` se omite cuando no hay payload (p.ej. borrado físico) y `error`
    solo aparece en respuestas de fallo.
    """
    contenido = RespuestaApi(success=success, message=message, data=data, error=error).model_dump(mode="json")
    if data is None:
        contenido.pop("data")
    if error is None:
        contenido.pop("error")
    return contenido


def respuesta_exito(data: Any, message: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=construir_sobre(True, message, data=data))


def respuesta_error(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=construir_sobre(False, message, error=error))
