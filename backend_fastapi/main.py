import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.routes.ajustes import router as ajustes_router
from backend_fastapi.api.routes.auth import router as auth_router
from backend_fastapi.api.routes.realtime import router as realtime_router
from backend_fastapi.api.routes.suscripciones import router as suscripciones_router
from backend_fastapi.api.routes.tareas import router as tareas_router
from infrastructure import container

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container.startup()
    logger.info("🚀 Tablero de tareas listo")
    yield
    container.shutdown()


app = FastAPI(title="Tablero de Tareas Hotel API", lifespan=lifespan)

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:5173")
origins = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["Authorization", "Content-Type"],
)

app.include_router(auth_router)
app.include_router(tareas_router)
app.include_router(suscripciones_router)
app.include_router(ajustes_router)
app.include_router(realtime_router)


@app.get("/health", tags=["salud"])
def health() -> dict[str, bool]:
    return {"ok": True}
