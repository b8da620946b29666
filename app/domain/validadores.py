"""
Validación de los IDs recibidos en la ruta o en el cuerpo.
"""
import re
from typing import Any

from app.domain.resultado import Ok, Resultado, argumento_invalido

ENTERO_REGEX = re.compile(r"^[+-]?\d+$")


def validar_id(valor: Any, mensaje: str = "El ID debe ser un número válido") -> Resultado:
    """Convierte un ID a entero; "12abc", 3.5 o True no son IDs válidos."""
    if isinstance(valor, bool):
        return argumento_invalido(mensaje)
    if isinstance(valor, int):
        return Ok(valor)
    if isinstance(valor, float):
        if valor.is_integer():
            return Ok(int(valor))
        return argumento_invalido(mensaje)
    if isinstance(valor, str) and ENTERO_REGEX.match(valor.strip()):
        return Ok(int(valor.strip()))
    return argumento_invalido(mensaje)
