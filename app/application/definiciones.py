"""
Definición declarativa de cada entidad: referencias a otras entidades,
unicidad, valores por defecto, ciclo de vida y tipo de borrado.

Los campos de entrada se declaran en los modelos de `app.domain.esquemas`.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from app.domain.ciclo_vida import MaquinaEstados
from app.domain.estados import (
    MAQUINA_CLIENTE,
    MAQUINA_FACTURACION,
    MAQUINA_GARANTIA,
    MAQUINA_REEMBOLSO,
    MAQUINA_SUBASTA,
)

ENTIDAD_CLIENTE = "cliente"
ENTIDAD_SUBASTA = "subasta"


@dataclass(frozen=True)
class Referencia:
    """Clave foránea cuyo registro debe existir antes de escribir."""
    campo: str
    entidad: str
    etiqueta: str
    femenino: bool = False

    def mensaje_no_encontrado(self, valor: Any) -> str:
        return f"{self.etiqueta} con ID {valor} no {'encontrada' if self.femenino else 'encontrado'}"


@dataclass(frozen=True)
class DefinicionEntidad:
    nombre: str
    femenino: bool
    maquina: Optional[MaquinaEstados] = None
    referencias: Tuple[Referencia, ...] = ()
    campo_unico: Optional[str] = None
    mensaje_conflicto: str = ""
    mensaje_conflicto_actualizacion: str = ""
    valores_por_defecto: Mapping[str, Any] = field(default_factory=dict)
    soporta_borrado_fisico: bool = False

    @property
    def articulo(self) -> str:
        return "de la" if self.femenino else "del"

    @property
    def mensaje_id_invalido(self) -> str:
        return f"El ID {self.articulo} {self.nombre.lower()} debe ser un número válido"

    def mensaje_no_encontrado(self, id_registro: Any) -> str:
        return f"{self.nombre} con ID {id_registro} no {'encontrada' if self.femenino else 'encontrado'}"


REF_CLIENTE = Referencia("idCliente", ENTIDAD_CLIENTE, "Cliente")
REF_SUBASTA = Referencia("idSubasta", ENTIDAD_SUBASTA, "Subasta", femenino=True)


CLIENTE = DefinicionEntidad(
    nombre="Cliente",
    femenino=False,
    maquina=MAQUINA_CLIENTE,
    campo_unico="correo",
    mensaje_conflicto="Ya existe un cliente con ese correo",
    mensaje_conflicto_actualizacion="Ya existe otro cliente con ese correo",
    valores_por_defecto={"saldoTotalDolar": 0.0},
)

SUBASTA = DefinicionEntidad(
    nombre="Subasta",
    femenino=True,
    maquina=MAQUINA_SUBASTA,
)

GARANTIA = DefinicionEntidad(
    nombre="Garantía",
    femenino=True,
    maquina=MAQUINA_GARANTIA,
    referencias=(REF_CLIENTE, REF_SUBASTA),
)

FACTURACION = DefinicionEntidad(
    nombre="Facturación",
    femenino=True,
    maquina=MAQUINA_FACTURACION,
    referencias=(REF_CLIENTE, REF_SUBASTA),
)

REEMBOLSO = DefinicionEntidad(
    nombre="Reembolso",
    femenino=False,
    maquina=MAQUINA_REEMBOLSO,
    referencias=(REF_CLIENTE,),
)

USUARIO = DefinicionEntidad(
    nombre="Usuario",
    femenino=False,
    campo_unico="email",
    mensaje_conflicto="Ya existe un usuario con ese email",
    mensaje_conflicto_actualizacion="Ya existe otro usuario con ese email",
    valores_por_defecto={"esta_activo": True},
    soporta_borrado_fisico=True,
)
