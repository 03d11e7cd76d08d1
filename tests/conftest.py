"""
Configuração global do pytest.

As variáveis de ambiente precisam existir antes do primeiro import do
pacote, pois settings e engine são criados no import.
"""
import base64
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="controle_processos_")

os.environ.setdefault("DATABASE_DSN", f"sqlite+aiosqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("JWE_SECRET_KEY", base64.urlsafe_b64encode(b"k" * 32).decode())
os.environ.setdefault("AUTH_API_KEY", "chave-de-teste")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient

from controle_processos.database import AsyncSessionLocal, Base, engine
from controle_processos.main import app
from controle_processos.permissoes import Papel

from factories import cabecalho


@pytest.fixture
async def banco():
    """Recria as tabelas a cada teste"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest.fixture
async def db(banco):
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client(banco):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def adm():
    return cabecalho(Papel.ADM)


@pytest.fixture
def tec():
    return cabecalho(Papel.TEC)


@pytest.fixture
def usr():
    return cabecalho(Papel.USR)
