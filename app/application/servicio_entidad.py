from typing import Any, Callable, Dict, Mapping, Optional

from app.application.definiciones import DefinicionEntidad
from app.domain.constants import MENSAJE_ID_CLIENTE, TRANSICION_CANCELAR
from app.domain.esquemas import Entrada, EntradaActualizacion
from app.domain.resultado import (
    Ok,
    Resultado,
    argumento_invalido,
    conflicto,
    es_error,
    no_encontrado,
)
from app.domain.validadores import validar_id
from app.utils.fechas import ahora


class ServicioEntidad:
    """
    Operaciones de una entidad: lectura, alta, actualización parcial,
    transiciones de ciclo de vida y borrado.

    Todas devuelven un `Resultado`. Los errores de almacenamiento no se
    capturan aquí: se propagan y el controlador los convierte en un error
    interno.
    """

    def __init__(
        self,
        definicion: DefinicionEntidad,
        repo,
        referencias: Optional[Mapping[str, Any]] = None,
        reloj: Callable = ahora,
        estricto: bool = False,
    ):
        self.definicion = definicion
        self.repo = repo
        self.referencias = dict(referencias or {})
        self.reloj = reloj
        self.estricto = estricto

    # Lectura
    def listar(self) -> Resultado:
        return Ok(self.repo.listar())

    def obtener(self, id_crudo: Any) -> Resultado:
        return self._buscar(id_crudo)

    def obtener_por_unico(self, valor: str) -> Resultado:
        campo = self.definicion.campo_unico
        registro = self.repo.buscar_por_unico(valor)
        if not registro:
            articulo = "encontrada" if self.definicion.femenino else "encontrado"
            return no_encontrado(f"{self.definicion.nombre} con {campo} {valor} no {articulo}")
        return Ok(registro)

    def listar_por_cliente(self, id_crudo: Any) -> Resultado:
        id_cliente = validar_id(id_crudo, MENSAJE_ID_CLIENTE)
        if es_error(id_cliente):
            return id_cliente
        return Ok(self.repo.listar_por_cliente(id_cliente.valor))

    # Escritura
    def crear(self, entrada: Entrada) -> Resultado:
        """Alta a partir de un cuerpo ya validado por su modelo `*Crear`."""
        valores: Dict[str, Any] = entrada.valores()

        verificacion = self._verificar_referencias(valores)
        if es_error(verificacion):
            return verificacion
        verificacion = self._verificar_unicidad(valores)
        if es_error(verificacion):
            return verificacion

        for campo, valor in self.definicion.valores_por_defecto.items():
            valores.setdefault(campo, valor)
        if self.definicion.maquina is not None:
            for campo, valor in self.definicion.maquina.valores_iniciales().items():
                valores.setdefault(campo, valor)
        valores["createdAt"] = self.reloj()
        return Ok(self.repo.crear(valores))

    def actualizar(
        self,
        id_crudo: Any,
        entrada: EntradaActualizacion,
        valores_extra: Optional[Mapping[str, Any]] = None,
    ) -> Resultado:
        """
        Actualización parcial: solo se aplican los campos presentes en el cuerpo.

        Args:
            id_crudo: ID recibido en la ruta
            entrada: Cuerpo validado por su modelo `*Actualizacion`
            valores_extra: Cambios fijos que se añaden a los del cuerpo
        """
        buscado = self._buscar(id_crudo)
        if es_error(buscado):
            return buscado
        id_registro = buscado.valor["id"]

        cambios: Dict[str, Any] = entrada.cambios()

        verificacion = self._verificar_referencias(cambios)
        if es_error(verificacion):
            return verificacion
        verificacion = self._verificar_unicidad(cambios, excluir_id=id_registro)
        if es_error(verificacion):
            return verificacion

        cambios.update(valores_extra or {})
        cambios["updatedAt"] = self.reloj()
        return self._persistir(id_registro, cambios)

    def transicionar(self, id_crudo: Any, nombre: str) -> Resultado:
        maquina = self.definicion.maquina
        if maquina is None or not maquina.soporta(nombre):
            return argumento_invalido(f"Transición '{nombre}' no soportada para {self.definicion.nombre.lower()}")

        buscado = self._buscar(id_crudo)
        if es_error(buscado):
            return buscado
        registro = buscado.valor

        cambios = maquina.aplicar(nombre, registro, self.reloj(), estricto=self.estricto)
        if es_error(cambios):
            return cambios
        return self._persistir(registro["id"], cambios.valor)

    def eliminar(self, id_crudo: Any) -> Resultado:
        """Borrado físico o cancelación lógica según la entidad."""
        if not self.definicion.soporta_borrado_fisico:
            return self.transicionar(id_crudo, TRANSICION_CANCELAR)

        buscado = self._buscar(id_crudo)
        if es_error(buscado):
            return buscado
        id_registro = buscado.valor["id"]
        if not self.repo.eliminar(id_registro):
            return no_encontrado(self.definicion.mensaje_no_encontrado(id_registro))
        return Ok(None)

    # Auxiliares
    def _buscar(self, id_crudo: Any) -> Resultado:
        id_registro = validar_id(id_crudo, self.definicion.mensaje_id_invalido)
        if es_error(id_registro):
            return id_registro
        registro = self.repo.obtener(id_registro.valor)
        if registro is None:
            return no_encontrado(self.definicion.mensaje_no_encontrado(id_registro.valor))
        return Ok(registro)

    def _persistir(self, id_registro: int, cambios: Dict[str, Any]) -> Resultado:
        actualizado = self.repo.actualizar(id_registro, cambios)
        if actualizado is None:
            # El registro desapareció entre la lectura y la escritura
            return no_encontrado(self.definicion.mensaje_no_encontrado(id_registro))
        return Ok(actualizado)

    def _verificar_referencias(self, valores: Mapping[str, Any]) -> Resultado:
        for ref in self.definicion.referencias:
            valor = valores.get(ref.campo)
            if valor is None:
                continue
            if not self.referencias[ref.entidad].existe(valor):
                return no_encontrado(ref.mensaje_no_encontrado(valor))
        return Ok(None)

    def _verificar_unicidad(self, valores: Mapping[str, Any], excluir_id: Optional[int] = None) -> Resultado:
        campo = self.definicion.campo_unico
        if not campo or valores.get(campo) is None:
            return Ok(None)
        if self.repo.buscar_por_unico(valores[campo], excluir_id=excluir_id):
            if excluir_id is None:
                return conflicto(self.definicion.mensaje_conflicto)
            return conflicto(self.definicion.mensaje_conflicto_actualizacion)
        return Ok(None)
