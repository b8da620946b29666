from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session


class RepositorioBase:
    """
    Acceso CRUD genérico sobre una tabla con clave primaria entera `id`.

    Las subclases fijan `modelo` y, si aplica, `campo_unico` (correo/email) y
    `campo_cliente` (clave foránea al cliente propietario). Los registros se
    devuelven como diccionarios planos.
    """

    modelo = None
    campo_unico: Optional[str] = None
    campo_cliente: Optional[str] = None

    def __init__(self, db_session: Session):
        self.db = db_session

    def listar(self) -> List[Dict[str, Any]]:
        stmt = select(self.modelo).order_by(self.modelo.id)
        rows = self.db.execute(stmt).scalars().all()
        return [self._to_dict(r) for r in rows]

    def obtener(self, id_registro: int) -> Optional[Dict[str, Any]]:
        item = self.db.get(self.modelo, id_registro)
        return self._to_dict(item) if item else None

    def existe(self, id_registro: int) -> bool:
        stmt = select(self.modelo.id).where(self.modelo.id == id_registro)
        return self.db.execute(stmt).first() is not None

    def buscar_por_unico(self, valor: Any, excluir_id: Optional[int] = None) -> Optional[Dict[str, Any]]:
        """Busca por la clave alternativa única, opcionalmente excluyendo un ID."""
        if not self.campo_unico:
            return None
        columna = getattr(self.modelo, self.campo_unico)
        stmt = select(self.modelo).where(columna == valor)
        if excluir_id is not None:
            stmt = stmt.where(self.modelo.id != excluir_id)
        item = self.db.execute(stmt.limit(1)).scalars().first()
        return self._to_dict(item) if item else None

    def listar_por_cliente(self, id_cliente: int) -> List[Dict[str, Any]]:
        if not self.campo_cliente:
            return []
        columna = getattr(self.modelo, self.campo_cliente)
        stmt = select(self.modelo).where(columna == id_cliente).order_by(self.modelo.id)
        rows = self.db.execute(stmt).scalars().all()
        return [self._to_dict(r) for r in rows]

    def crear(self, campos: Dict[str, Any]) -> Dict[str, Any]:
        item = self.modelo(**campos)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return self._to_dict(item)

    def actualizar(self, id_registro: int, campos: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        stmt = (
            update(self.modelo)
            .where(self.modelo.id == id_registro)
            .values(**campos)
            .execution_options(synchronize_session="fetch")
        )
        res = self.db.execute(stmt)
        if not res.rowcount:
            self.db.rollback()
            return None
        self.db.commit()
        return self.obtener(id_registro)

    def eliminar(self, id_registro: int) -> bool:
        res = self.db.execute(delete(self.modelo).where(self.modelo.id == id_registro))
        if not res.rowcount:
            self.db.rollback()
            return False
        self.db.commit()
        return True

    def _to_dict(self, item) -> Dict[str, Any]:
        return {
            columna.key: getattr(item, columna.key)
            for columna in self.modelo.__table__.columns
        }
