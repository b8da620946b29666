"""
Máquinas de estado de cada entidad.
"""
from datetime import datetime
from typing import Any, Dict, Mapping

from app.domain.ciclo_vida import MaquinaEstados, Transicion
from app.domain.constants import (
    FACTURACION_PENDIENTE,
    FACTURACION_REVOCADA,
    FACTURACION_VALIDADA,
    GARANTIA_CANCELADA,
    GARANTIA_ENVIADA,
    GARANTIA_INVALIDA,
    GARANTIA_PENDIENTE_VALIDACION,
    GARANTIA_REVOCADA,
    GARANTIA_VALIDADA,
    REEMBOLSO_APROBADO,
    REEMBOLSO_PENDIENTE,
    REEMBOLSO_REVOCADO,
    SUBASTA_ABIERTA,
    SUBASTA_CANCELADA,
    SUBASTA_CERRADA,
    TRANSICION_ALTERNAR,
    TRANSICION_CANCELAR,
    TRANSICION_CERRAR,
    TRANSICION_ENVIAR,
    TRANSICION_INVALIDAR,
    TRANSICION_PAGAR,
    TRANSICION_REVOCAR,
    TRANSICION_VALIDAR,
)


def _maquina(entidad, campo_estado, estado_inicial, *transiciones, derivar_estado=None) -> MaquinaEstados:
    return MaquinaEstados(
        entidad=entidad,
        campo_estado=campo_estado,
        estado_inicial=estado_inicial,
        transiciones={t.nombre: t for t in transiciones},
        derivar_estado=derivar_estado,
    )


MAQUINA_GARANTIA = _maquina(
    "garantía",
    "estado",
    GARANTIA_PENDIENTE_VALIDACION,
    Transicion(
        TRANSICION_VALIDAR,
        estado_destino=GARANTIA_VALIDADA,
        marca_tiempo="validatedAt",
        origenes=frozenset({GARANTIA_PENDIENTE_VALIDACION, GARANTIA_INVALIDA}),
    ),
    Transicion(
        TRANSICION_INVALIDAR,
        estado_destino=GARANTIA_INVALIDA,
        marca_tiempo="invalidatedAt",
        origenes=frozenset({GARANTIA_PENDIENTE_VALIDACION, GARANTIA_VALIDADA}),
    ),
    Transicion(
        TRANSICION_REVOCAR,
        estado_destino=GARANTIA_REVOCADA,
        marca_tiempo="revokedAt",
        origenes=frozenset({GARANTIA_VALIDADA, GARANTIA_ENVIADA}),
    ),
    # El pago solo sella paidAt; el estado no cambia
    Transicion(
        TRANSICION_PAGAR,
        marca_tiempo="paidAt",
        origenes=frozenset({GARANTIA_VALIDADA, GARANTIA_ENVIADA}),
    ),
    Transicion(
        TRANSICION_ENVIAR,
        estado_destino=GARANTIA_ENVIADA,
        marca_tiempo="sentedAt",
        origenes=frozenset({GARANTIA_VALIDADA}),
    ),
    Transicion(
        TRANSICION_CANCELAR,
        estado_destino=GARANTIA_CANCELADA,
        marca_tiempo="canceledAt",
        origenes=frozenset({GARANTIA_PENDIENTE_VALIDACION, GARANTIA_VALIDADA, GARANTIA_INVALIDA}),
    ),
)


def _estado_facturacion(registro: Mapping[str, Any]) -> str:
    if registro.get("revokedAt"):
        return FACTURACION_REVOCADA
    if registro.get("validatedAt"):
        return FACTURACION_VALIDADA
    return FACTURACION_PENDIENTE


MAQUINA_FACTURACION = _maquina(
    "facturación",
    None,
    None,
    # validate sobrescribe validatedAt aunque ya estuviera sellada
    Transicion(
        TRANSICION_VALIDAR,
        marca_tiempo="validatedAt",
        origenes=frozenset({FACTURACION_PENDIENTE, FACTURACION_VALIDADA}),
    ),
    Transicion(
        TRANSICION_REVOCAR,
        marca_tiempo="revokedAt",
        origenes=frozenset({FACTURACION_PENDIENTE, FACTURACION_VALIDADA}),
    ),
    derivar_estado=_estado_facturacion,
)

MAQUINA_REEMBOLSO = _maquina(
    "reembolso",
    "estado",
    REEMBOLSO_PENDIENTE,
    Transicion(
        TRANSICION_VALIDAR,
        estado_destino=REEMBOLSO_APROBADO,
        marca_tiempo="validatedAt",
        origenes=frozenset({REEMBOLSO_PENDIENTE}),
    ),
    Transicion(
        TRANSICION_REVOCAR,
        estado_destino=REEMBOLSO_REVOCADO,
        marca_tiempo="revokedAt",
        origenes=frozenset({REEMBOLSO_PENDIENTE, REEMBOLSO_APROBADO}),
    ),
)

MAQUINA_SUBASTA = _maquina(
    "subasta",
    "estado",
    SUBASTA_ABIERTA,
    Transicion(
        TRANSICION_CERRAR,
        estado_destino=SUBASTA_CERRADA,
        marca_tiempo="closedAt",
        origenes=frozenset({SUBASTA_ABIERTA}),
    ),
    Transicion(
        TRANSICION_CANCELAR,
        estado_destino=SUBASTA_CANCELADA,
        marca_tiempo="canceledAt",
        origenes=frozenset({SUBASTA_ABIERTA}),
    ),
)


def _alternar_activo(registro: Mapping[str, Any], momento: datetime) -> Dict[str, Any]:
    nuevo = not registro.get("activo")
    cambios: Dict[str, Any] = {"activo": nuevo}
    if not nuevo:
        cambios["canceledAt"] = momento
    return cambios


def _cancelar_cliente(registro: Mapping[str, Any], momento: datetime) -> Dict[str, Any]:
    return {"activo": False, "canceledAt": momento}


MAQUINA_CLIENTE = _maquina(
    "cliente",
    "activo",
    True,
    Transicion(TRANSICION_ALTERNAR, efecto=_alternar_activo),
    Transicion(TRANSICION_CANCELAR, efecto=_cancelar_cliente, origenes=frozenset({True})),
)
