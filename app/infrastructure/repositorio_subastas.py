from app.domain.models.subasta import Subasta
from app.infrastructure.repositorio_base import RepositorioBase


class RepositorioSubastas(RepositorioBase):
    modelo = Subasta
