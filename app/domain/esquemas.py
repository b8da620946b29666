"""
Modelos de entrada (pydantic) de cada entidad.

Los modelos `*Crear` declaran los campos obligatorios del alta y los
`*Actualizacion` admiten cualquier subconjunto para la actualización parcial.
Las claves desconocidas (id, createdAt, ...) se ignoran.
"""
import math
from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, List, Literal, Mapping, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    ValidationInfo,
    WrapValidator,
    field_validator,
)
from pydantic_core import PydanticCustomError

from app.domain.constants import (
    MENSAJE_CAMPOS_OBLIGATORIOS,
    MENSAJE_CUERPO_INVALIDO,
    MENSAJE_EMAIL_INVALIDO,
    MENSAJE_ID_CLIENTE,
    MENSAJE_ID_SUBASTA,
)
from app.domain.resultado import es_error
from app.domain.validadores import validar_id
from app.utils.fechas import parse_fecha

# Tipos de error propios; su `msg` es el mensaje que se devuelve al cliente
ERROR_OBLIGATORIO = "campo_obligatorio"
ERROR_VALOR = "valor_invalido"


def _a_numero(valor: Any, info: ValidationInfo) -> Any:
    if valor is None:
        return valor
    mensaje = f"El campo {info.field_name} debe ser un número válido"
    if isinstance(valor, bool) or not isinstance(valor, (int, float, str)):
        raise PydanticCustomError(ERROR_VALOR, mensaje)
    try:
        numero = float(valor.strip() if isinstance(valor, str) else valor)
    except (ValueError, OverflowError):
        raise PydanticCustomError(ERROR_VALOR, mensaje)
    # NaN e infinito llegan también como float desde el JSON (NaN, 1e999)
    if not math.isfinite(numero):
        raise PydanticCustomError(ERROR_VALOR, mensaje)
    return numero


def _a_fecha(valor: Any, info: ValidationInfo) -> Any:
    if valor is None or isinstance(valor, datetime):
        return valor
    fecha = parse_fecha(valor) if isinstance(valor, str) else None
    if fecha is None:
        raise PydanticCustomError(ERROR_VALOR, f"El campo {info.field_name} debe ser una fecha válida")
    return fecha


def _validador_id(mensaje: str):
    def _a_id(valor: Any) -> Any:
        if valor is None:
            return valor
        resultado = validar_id(valor, mensaje)
        if es_error(resultado):
            raise PydanticCustomError(ERROR_VALOR, mensaje)
        return resultado.valor
    return _a_id


def _correo(valor: Any, handler) -> Any:
    try:
        return handler(valor)
    except ValidationError:
        raise PydanticCustomError(ERROR_VALOR, MENSAJE_EMAIL_INVALIDO)


Numero = Annotated[Optional[float], BeforeValidator(_a_numero)]
Fecha = Annotated[Optional[datetime], BeforeValidator(_a_fecha)]
IdCliente = Annotated[Optional[int], BeforeValidator(_validador_id(MENSAJE_ID_CLIENTE))]
IdSubasta = Annotated[Optional[int], BeforeValidator(_validador_id(MENSAJE_ID_SUBASTA))]
Correo = Annotated[Optional[EmailStr], WrapValidator(_correo)]

EstadoSubasta = Literal["ABIERTO", "CERRADA", "CANCELADA"]
EstadoGarantia = Literal["PV", "V", "I", "R", "E", "cancelada"]
EstadoReembolso = Literal["P", "A", "R"]


class Entrada(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, allow_inf_nan=False)

    @field_validator("*", mode="before")
    @classmethod
    def _vacios_a_none(cls, valor: Any, info: ValidationInfo) -> Any:
        """Texto en blanco cuenta como no proporcionado; 0 y False sí cuentan."""
        if isinstance(valor, str) and not valor.strip():
            valor = None
        if valor is None and cls.model_fields[info.field_name].is_required():
            raise PydanticCustomError(ERROR_OBLIGATORIO, MENSAJE_CAMPOS_OBLIGATORIOS)
        return valor

    def valores(self) -> Dict[str, Any]:
        """Valores del alta; los opcionales vacíos quedan fuera para que apliquen los defaults."""
        return self.model_dump(exclude_none=True)


class EntradaActualizacion(Entrada):
    # Campos que se escriben aunque lleguen null o vacíos
    CAMPOS_VACIABLES: ClassVar[FrozenSet[str]] = frozenset()

    def cambios(self) -> Dict[str, Any]:
        """Solo los campos presentes en el cuerpo; los vacíos se ignoran salvo en campos vaciables."""
        return {
            campo: valor
            for campo, valor in self.model_dump(exclude_unset=True).items()
            if valor is not None or campo in self.CAMPOS_VACIABLES
        }


# Cliente
class ClienteCrear(Entrada):
    correo: Correo
    nombreCompleto: Optional[str]
    tipDocumento: Optional[str]
    numDocumento: Optional[str]
    numCelular: Optional[str]
    saldoTotalDolar: Numero = None
    dtFacRuc: Optional[str] = None
    dtFacRazonSocial: Optional[str] = None


class ClienteActualizacion(EntradaActualizacion):
    CAMPOS_VACIABLES: ClassVar[FrozenSet[str]] = frozenset({"dtFacRuc", "dtFacRazonSocial"})

    correo: Correo = None
    nombreCompleto: Optional[str] = None
    tipDocumento: Optional[str] = None
    numDocumento: Optional[str] = None
    numCelular: Optional[str] = None
    saldoTotalDolar: Numero = None
    dtFacRuc: Optional[str] = None
    dtFacRazonSocial: Optional[str] = None


# Subasta
class SubastaCrear(Entrada):
    titulo: Optional[str]
    imgSubasta: Optional[str] = None
    placaVehiculo: Optional[str]
    empresa: Optional[str]
    fecha: Fecha
    moneda: Optional[str]
    monto: Numero
    descripcion: Optional[str] = None
    estado: Optional[EstadoSubasta] = None


class SubastaActualizacion(EntradaActualizacion):
    CAMPOS_VACIABLES: ClassVar[FrozenSet[str]] = frozenset({"imgSubasta", "descripcion"})

    titulo: Optional[str] = None
    imgSubasta: Optional[str] = None
    placaVehiculo: Optional[str] = None
    empresa: Optional[str] = None
    fecha: Fecha = None
    moneda: Optional[str] = None
    monto: Numero = None
    descripcion: Optional[str] = None
    estado: Optional[EstadoSubasta] = None


# Garantía
class GarantiaCrear(Entrada):
    idCliente: IdCliente
    idSubasta: IdSubasta
    concepto: Optional[str]
    fechaSubasta: Fecha
    fechaExpiracion: Fecha
    tipo: Optional[str]
    moneda: Optional[str]
    montoGarantia: Numero
    montoPuja: Numero = None
    porcentaje: Numero = None
    banco: Optional[str]
    numCuentaDeposito: Optional[str]
    docAdjunto: Optional[str]
    comentarios: Optional[str] = None


class GarantiaActualizacion(EntradaActualizacion):
    CAMPOS_VACIABLES: ClassVar[FrozenSet[str]] = frozenset({"docAdjunto", "comentarios"})

    idCliente: IdCliente = None
    idSubasta: IdSubasta = None
    concepto: Optional[str] = None
    fechaSubasta: Fecha = None
    fechaExpiracion: Fecha = None
    tipo: Optional[str] = None
    moneda: Optional[str] = None
    montoGarantia: Numero = None
    montoPuja: Numero = None
    porcentaje: Numero = None
    banco: Optional[str] = None
    numCuentaDeposito: Optional[str] = None
    docAdjunto: Optional[str] = None
    comentarios: Optional[str] = None
    estado: Optional[EstadoGarantia] = None


class GarantiaReenvio(EntradaActualizacion):
    """Campos que el propio cliente puede corregir al reenviar una garantía."""
    CAMPOS_VACIABLES: ClassVar[FrozenSet[str]] = frozenset({"docAdjunto", "comentarios"})

    banco: Optional[str] = None
    numCuentaDeposito: Optional[str] = None
    docAdjunto: Optional[str] = None
    comentarios: Optional[str] = None
    montoPuja: Numero = None


# Facturación
class FacturacionCrear(Entrada):
    idCliente: IdCliente
    idSubasta: IdSubasta = None
    monto: Numero
    banco: Optional[str]
    numCuentaDeposito: Optional[str]
    docAdjunto: Optional[str] = None
    concepto: Optional[str]
    comentarios: Optional[str] = None


class FacturacionActualizacion(EntradaActualizacion):
    CAMPOS_VACIABLES: ClassVar[FrozenSet[str]] = frozenset({"docAdjunto", "comentarios"})

    idCliente: IdCliente = None
    idSubasta: IdSubasta = None
    monto: Numero = None
    banco: Optional[str] = None
    numCuentaDeposito: Optional[str] = None
    docAdjunto: Optional[str] = None
    concepto: Optional[str] = None
    comentarios: Optional[str] = None


# Reembolso
_MONTO_REEMBOLSO = AliasChoices("monto", "montoReembolso")


class ReembolsoCrear(Entrada):
    idCliente: IdCliente
    monto: Numero = Field(validation_alias=_MONTO_REEMBOLSO)
    banco: Optional[str]
    numCuentaDeposito: Optional[str]
    docAdjunto: Optional[str] = None
    comentarios: Optional[str] = None


class ReembolsoActualizacion(EntradaActualizacion):
    CAMPOS_VACIABLES: ClassVar[FrozenSet[str]] = frozenset({"docAdjunto", "comentarios"})

    idCliente: IdCliente = None
    monto: Numero = Field(None, validation_alias=_MONTO_REEMBOLSO)
    banco: Optional[str] = None
    numCuentaDeposito: Optional[str] = None
    docAdjunto: Optional[str] = None
    comentarios: Optional[str] = None
    estado: Optional[EstadoReembolso] = None


# Usuario
class UsuarioCrear(Entrada):
    email: Correo
    nombre: Optional[str]
    telefono: Optional[str] = None
    tipo_usuario: Optional[str]


class UsuarioActualizacion(EntradaActualizacion):
    CAMPOS_VACIABLES: ClassVar[FrozenSet[str]] = frozenset({"telefono"})

    email: Correo = None
    nombre: Optional[str] = None
    telefono: Optional[str] = None
    tipo_usuario: Optional[str] = None
    esta_activo: Optional[bool] = None


def mensaje_de_validacion(errores: List[Mapping[str, Any]]) -> str:
    """
    Reduce los errores de validación de un cuerpo a un único mensaje.

    La falta de un campo obligatorio tiene prioridad (comprobación todo o nada);
    después, el primer error con mensaje propio; si no, se nombra el campo.
    """
    if any(e["type"] in ("missing", ERROR_OBLIGATORIO) for e in errores):
        return MENSAJE_CAMPOS_OBLIGATORIOS
    for error in errores:
        if error["type"] == ERROR_VALOR:
            return error["msg"]
    for error in errores:
        loc = [parte for parte in error.get("loc", ()) if parte != "body"]
        if loc and isinstance(loc[0], str):
            return f"El campo {loc[0]} no es válido"
    return MENSAJE_CUERPO_INVALIDO
