"""
Motor de ciclo de vida de las entidades con estado.

Cada entidad declara una `MaquinaEstados` con sus transiciones nombradas. Una
transición fija qué estado se escribe y qué marca de tiempo se sella; el motor
calcula los cambios a persistir (siempre incluye `updatedAt`).

Por defecto las transiciones no comprueban el estado actual: cualquier
transición se puede disparar desde cualquier estado. En modo estricto se
rechazan las transiciones cuyo estado de origen no está en `origenes`.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional

from app.domain.resultado import Ok, Resultado, estado_invalido

Efecto = Callable[[Mapping[str, Any], datetime], Dict[str, Any]]


@dataclass(frozen=True)
class Transicion:
    nombre: str
    estado_destino: Optional[str] = None
    marca_tiempo: Optional[str] = None
    # Estados desde los que la transición es legal en modo estricto (None = cualquiera)
    origenes: Optional[FrozenSet[str]] = None
    # Mutación a medida cuando no basta con estado + marca de tiempo
    efecto: Optional[Efecto] = None

    def cambios(self, registro: Mapping[str, Any], momento: datetime, campo_estado: Optional[str]) -> Dict[str, Any]:
        if self.efecto is not None:
            cambios = dict(self.efecto(registro, momento))
        else:
            cambios = {}
            if self.estado_destino is not None and campo_estado:
                cambios[campo_estado] = self.estado_destino
            if self.marca_tiempo:
                cambios[self.marca_tiempo] = momento
        cambios["updatedAt"] = momento
        return cambios


@dataclass(frozen=True)
class MaquinaEstados:
    entidad: str
    campo_estado: Optional[str]
    estado_inicial: Optional[Any]
    transiciones: Mapping[str, Transicion] = field(default_factory=dict)
    # Para entidades sin columna de estado (facturación) el estado se deduce del registro
    derivar_estado: Optional[Callable[[Mapping[str, Any]], str]] = None

    def estado_actual(self, registro: Mapping[str, Any]) -> Any:
        if self.derivar_estado is not None:
            return self.derivar_estado(registro)
        if self.campo_estado:
            return registro.get(self.campo_estado)
        return None

    def soporta(self, nombre: str) -> bool:
        return nombre in self.transiciones

    def valores_iniciales(self) -> Dict[str, Any]:
        if self.campo_estado and self.estado_inicial is not None:
            return {self.campo_estado: self.estado_inicial}
        return {}

    def aplicar(
        self,
        nombre: str,
        registro: Mapping[str, Any],
        momento: datetime,
        estricto: bool = False,
    ) -> Resultado:
        """
        Calcula los cambios de una transición sobre un registro.

        Args:
            nombre: Nombre de la transición (validate, revoke, ...)
            registro: Registro actual como diccionario
            momento: Instante que se sella en las marcas de tiempo
            estricto: Si es True, valida el estado de origen

        Returns:
            Ok(dict de cambios) o Err(ESTADO_INVALIDO)
        """
        transicion = self.transiciones[nombre]
        if estricto and transicion.origenes is not None:
            actual = self.estado_actual(registro)
            if actual not in transicion.origenes:
                return estado_invalido(
                    f"No se puede aplicar '{nombre}' a {self.entidad} en estado {actual}"
                )
        return Ok(transicion.cambios(registro, momento, self.campo_estado))
