from fastapi import APIRouter
from .auth import router as auth_router
from .processos import router as processos_router
from .unidades import router as unidades_router
from .interessados import router as interessados_router

router = APIRouter()

router.include_router(auth_router, prefix="/auth", tags=["Auth"])
router.include_router(processos_router, prefix="/processos", tags=["Processos"])
router.include_router(unidades_router, prefix="/unidades", tags=["Unidades"])
router.include_router(interessados_router, prefix="/interessados", tags=["Interessados"])
