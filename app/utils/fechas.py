"""
Utilidades de fechas compartidas por modelos, validadores y ciclo de vida.
"""
from datetime import datetime, timezone
from typing import Optional


def ahora() -> datetime:
    """Instante actual en UTC sin tzinfo (así se persiste en las columnas DateTime)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_fecha(valor: Optional[str]) -> Optional[datetime]:
    """
    Parsea una fecha desde string ISO a datetime.

    Args:
        valor: String en formato ISO (YYYY-MM-DD, YYYY-MM-DDTHH:MM:SS, con o sin zona)

    Returns:
        datetime naive en UTC o None si no se puede parsear
    """
    if not valor or not str(valor).strip():
        return None

    texto = str(valor).strip()
    if texto.endswith("Z"):
        texto = texto[:-1] + "+00:00"

    for fmt in ("%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"):
        try:
            return datetime.strptime(texto, fmt)
        except ValueError:
            continue
    try:
        fecha = datetime.fromisoformat(texto)
    except ValueError:
        return None
    if fecha.tzinfo is not None:
        fecha = fecha.astimezone(timezone.utc).replace(tzinfo=None)
    return fecha
