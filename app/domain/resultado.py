"""
Resultado etiquetado de las operaciones de dominio.

Las operaciones no lanzan excepciones para los errores esperados: devuelven
`Ok(valor)` o `Err(tipo, mensaje)` y el controlador traduce el resultado al
sobre JSON y al código HTTP correspondiente.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class TipoError(str, Enum):
    ARGUMENTO_INVALIDO = "InvalidArgument"
    NO_ENCONTRADO = "NotFound"
    CONFLICTO = "Conflict"
    ESTADO_INVALIDO = "InvalidState"
    INTERNO = "Internal"


@dataclass(frozen=True)
class Ok:
    valor: Any = None


@dataclass(frozen=True)
class Err:
    tipo: TipoError
    mensaje: str
    detalle: Optional[str] = None


Resultado = Union[Ok, Err]


def es_error(resultado: Resultado) -> bool:
    return isinstance(resultado, Err)


def argumento_invalido(mensaje: str) -> Err:
    return Err(TipoError.ARGUMENTO_INVALIDO, mensaje)


def no_encontrado(mensaje: str) -> Err:
    return Err(TipoError.NO_ENCONTRADO, mensaje)


def conflicto(mensaje: str) -> Err:
    return Err(TipoError.CONFLICTO, mensaje)


def estado_invalido(mensaje: str) -> Err:
    return Err(TipoError.ESTADO_INVALIDO, mensaje)
