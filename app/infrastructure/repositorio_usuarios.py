from app.domain.models.usuario import Usuario
from app.infrastructure.repositorio_base import RepositorioBase


class RepositorioUsuarios(RepositorioBase):
    modelo = Usuario
    campo_unico = "email"
