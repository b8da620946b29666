from app.domain.models.garantia import Garantia
from app.infrastructure.repositorio_base import RepositorioBase


class RepositorioGarantias(RepositorioBase):
    modelo = Garantia
    campo_cliente = "idCliente"
