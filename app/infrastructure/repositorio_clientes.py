from app.domain.models.cliente import Cliente
from app.infrastructure.repositorio_base import RepositorioBase


class RepositorioClientes(RepositorioBase):
    modelo = Cliente
    campo_unico = "correo"
