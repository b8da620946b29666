"""
Utilidades para manejo consistente de errores en controladores.
"""
from typing import Callable, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.domain.esquemas import mensaje_de_validacion
from app.domain.resultado import Err, Resultado, TipoError
from app.utils.respuestas import respuesta_error, respuesta_exito

logger = logging.getLogger(__name__)

ESTADOS_HTTP = {
    TipoError.ARGUMENTO_INVALIDO: status.HTTP_400_BAD_REQUEST,
    TipoError.NO_ENCONTRADO: status.HTTP_404_NOT_FOUND,
    TipoError.CONFLICTO: status.HTTP_409_CONFLICT,
    TipoError.ESTADO_INVALIDO: status.HTTP_409_CONFLICT,
    TipoError.INTERNO: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

MensajeExito = Union[str, Callable[[object], str]]


def ejecutar_operacion(
    operacion: Callable[[], Resultado],
    *,
    mensaje_exito: MensajeExito,
    mensaje_error: str,
    status_exito: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Ejecuta una operación de dominio y construye la respuesta HTTP.

    Args:
        operacion: Callable sin argumentos que devuelve un Resultado
        mensaje_exito: Mensaje (o función del valor devuelto) para el éxito
        mensaje_error: Mensaje para errores inesperados
        status_exito: Código HTTP del éxito (200 o 201)

    Returns:
        JSONResponse con el sobre {success, data, message, error}
    """
    try:
        resultado = operacion()
    except Exception as error:
        logger.error(f"{mensaje_error}: {str(error)}", exc_info=True)
        return respuesta_error(status.HTTP_500_INTERNAL_SERVER_ERROR, mensaje_error, str(error))

    if isinstance(resultado, Err):
        if resultado.tipo == TipoError.INTERNO:
            logger.error(f"{mensaje_error}: {resultado.detalle or resultado.mensaje}")
        else:
            logger.info(f"Petición rechazada ({resultado.tipo.value}): {resultado.mensaje}")
        return respuesta_error(ESTADOS_HTTP[resultado.tipo], resultado.mensaje, resultado.detalle)

    mensaje = mensaje_exito(resultado.valor) if callable(mensaje_exito) else mensaje_exito
    return respuesta_exito(resultado.valor, mensaje, status_exito)


def registrar_manejadores_error(app: FastAPI) -> None:
    """Convierte los errores del framework al mismo sobre JSON."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Error de validación en %s - %s", request.url, exc.errors())
        return respuesta_error(status.HTTP_400_BAD_REQUEST, mensaje_de_validacion(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning("Error HTTP %s en %s - %s", exc.status_code, request.url, exc.detail)
        return respuesta_error(exc.status_code, str(exc.detail))
