import uvicorn

from .config import settings

if __name__ == "__main__":
    uvicorn.run(
        "controle_processos.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
    )
