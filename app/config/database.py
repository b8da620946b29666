from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.engine.url import make_url
from app.config.settings import get_database_url
import logging

logger = logging.getLogger("db")


def _connect_args_for_url(url_str: str) -> dict:
    """Argumentos de conexión específicos del motor.

    SQLite necesita `check_same_thread=False` porque FastAPI ejecuta los
    endpoints síncronos en un pool de hilos.
    """
    try:
        if make_url(url_str).drivername.startswith("sqlite"):
            return {"check_same_thread": False}
    except Exception:
        logger.warning(f"URL de base de datos no reconocida: {url_str}")
    return {}


DATABASE_URL = get_database_url()
engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,     # Verificar conexiones antes de usar
    echo=False,             # Desactivar logging SQL
    connect_args=_connect_args_for_url(DATABASE_URL),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency para obtener sesión de base de datos"""
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"Error en sesión de base de datos: {e}")
        db.rollback()
        raise
    finally:
        try:
            db.close()
        except Exception as e:
            logger.warning(f"Error cerrando sesión de base de datos: {e}")


def init_db(metadata, bind=None):
    """Crea las tablas si no existen.

    Recibe el objeto Base.metadata para evitar dependencia circular con los modelos.
    """
    metadata.create_all(bind=bind or engine)


def check_connection(bind=None) -> bool:
    """Ejecuta un SELECT 1 contra la BD configurada."""
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"No se pudo conectar a la base de datos: {e}")
        return False
