from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from app.interfaces.clientes_controller import router as clientes_router
from app.interfaces.subastas_controller import router as subastas_router
from app.interfaces.garantias_controller import router as garantias_router
from app.interfaces.facturacion_controller import router as facturacion_router
from app.interfaces.reembolsos_controller import router as reembolsos_router
from app.interfaces.usuarios_controller import router as usuarios_router
from app.config.database import Base, init_db
from app.config.settings import get_cors_origins, get_log_level
from app.utils.error_handlers import registrar_manejadores_error

# Configuración de logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Crea las tablas al arrancar."""
    try:
        init_db(Base.metadata)
    except Exception as e:
        # La API arranca igualmente; cada petición devolverá el error de BD
        logger.error(f"No se pudieron crear las tablas: {e}", exc_info=True)
    yield


app = FastAPI(
    title="API Subastas",
    version="1.0.0",
    description="API para gestión de clientes, subastas, garantías, facturación y reembolsos",
    lifespan=lifespan,
)

# Middleware de CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["Content-Type", "Authorization"],
)

registrar_manejadores_error(app)

# Registro de routers
app.include_router(clientes_router)
app.include_router(subastas_router)
app.include_router(garantias_router)
app.include_router(facturacion_router)
app.include_router(reembolsos_router)
app.include_router(usuarios_router)


@app.get("/", tags=["Status"])
def raiz():
    return {"message": "Hola, bienvenido a la API de subastas"}


# Health check
@app.get("/health", tags=["Status"])
def health_check():
    return {
        "status": "ok",
        "title": "API Subastas",
        "version": "1.0.0"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3000)
