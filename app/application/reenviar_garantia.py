from typing import Any

from app.application.servicio_entidad import ServicioEntidad
from app.domain.constants import GARANTIA_PENDIENTE_VALIDACION
from app.domain.esquemas import GarantiaReenvio
from app.domain.resultado import Resultado


class ReenviarGarantia:
    """
    Corrección de una garantía por parte del cliente.

    Solo admite los datos de depósito y comentarios (`GarantiaReenvio`); la
    garantía vuelve a quedar pendiente de validación (PV) para que se revise
    de nuevo.
    """

    def __init__(self, servicio: ServicioEntidad):
        self.servicio = servicio

    def execute(self, id_crudo: Any, entrada: GarantiaReenvio) -> Resultado:
        return self.servicio.actualizar(
            id_crudo,
            entrada,
            valores_extra={"estado": GARANTIA_PENDIENTE_VALIDACION},
        )
