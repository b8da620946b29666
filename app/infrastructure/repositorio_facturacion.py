from app.domain.models.facturacion import Facturacion
from app.infrastructure.repositorio_base import RepositorioBase


class RepositorioFacturacion(RepositorioBase):
    modelo = Facturacion
    campo_cliente = "idCliente"
