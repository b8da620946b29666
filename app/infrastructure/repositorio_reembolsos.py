from app.domain.models.reembolso import Reembolso
from app.infrastructure.repositorio_base import RepositorioBase


class RepositorioReembolsos(RepositorioBase):
    modelo = Reembolso
    campo_cliente = "idCliente"
