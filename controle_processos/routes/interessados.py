"""
Rotas para gerenciamento de interessados
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
import logging

from ..auth import UsuarioAtual, exigir_permissao
from ..database import get_db
from ..permissoes import Operacao
from ..schemas import InteressadoCreate, InteressadoUpdate, InteressadoResponse, Remocao
from ..services import interessados as interessados_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/lista-completa",
    response_model=dict,
    summary="Listar todos os interessados ativos",
)
async def lista_completa(
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.INTERESSADO_LER)),
    db: AsyncSession = Depends(get_db),
):
    interessados = await interessados_service.lista_completa(db)
    return {"status": "success", "data": [InteressadoResponse.model_validate(i) for i in interessados]}


@router.get(
    "/buscar",
    response_model=dict,
    summary="Autocomplete de interessados",
)
async def buscar_por_termo(
    termo: str = Query(..., min_length=1, description="Termo digitado"),
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.INTERESSADO_LER)),
    db: AsyncSession = Depends(get_db),
):
    interessados = await interessados_service.buscar_por_termo(db, termo)
    return {"status": "success", "data": [InteressadoResponse.model_validate(i) for i in interessados]}


@router.post(
    "",
    response_model=dict,
    status_code=201,
    summary="Criar interessado",
)
async def criar_interessado(
    dados: InteressadoCreate,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.INTERESSADO_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    interessado = await interessados_service.criar(db, dados, usuario.id)
    return {"status": "success", "data": InteressadoResponse.model_validate(interessado)}


@router.get(
    "/{interessado_id}",
    response_model=dict,
    summary="Buscar interessado por ID",
)
async def buscar_por_id(
    interessado_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.INTERESSADO_LER)),
    db: AsyncSession = Depends(get_db),
):
    interessado = await interessados_service.obter_ativo(db, interessado_id)
    return {"status": "success", "data": InteressadoResponse.model_validate(interessado)}


@router.patch(
    "/{interessado_id}",
    response_model=dict,
    summary="Atualizar interessado",
)
async def atualizar_interessado(
    interessado_id: UUID,
    dados: InteressadoUpdate,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.INTERESSADO_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    interessado = await interessados_service.atualizar(db, interessado_id, dados, usuario.id)
    return {"status": "success", "data": InteressadoResponse.model_validate(interessado)}


@router.delete(
    "/{interessado_id}",
    response_model=dict,
    summary="Remover interessado (soft delete)",
)
async def remover_interessado(
    interessado_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.INTERESSADO_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    resultado = await interessados_service.remover(db, interessado_id, usuario.id)
    return {"status": "success", "data": Remocao(**resultado)}
