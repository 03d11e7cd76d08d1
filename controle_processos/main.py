import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .database import init_db, close_db
from .exceptions import ErroDominio
from .routes import router
from .schemas import ErrorDetail, ErrorType

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DATABASE_AUTO_CREATE:
        await init_db()
    yield
    await close_db()


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_check():
    return {
        "status": "ok",
        "version": settings.API_VERSION,
    }


@app.exception_handler(ErroDominio)
async def domain_exception_handler(request: Request, exc: ErroDominio):
    error_detail = ErrorDetail(
        type=exc.tipo,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "error": error_detail.model_dump(mode="json")}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Erro não tratado em {request.method} {request.url.path}")
    error_detail = ErrorDetail(
        type=ErrorType.PROCESSING_ERROR,
        message="Erro interno do servidor",
    )
    return JSONResponse(
        status_code=500,
        content={"status": "error", "error": error_detail.model_dump(mode="json")}
    )


app.include_router(router)
