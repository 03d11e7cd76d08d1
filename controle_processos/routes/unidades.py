"""
Rotas para gerenciamento de unidades
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID
import logging

from ..auth import UsuarioAtual, exigir_permissao
from ..database import get_db
from ..permissoes import Operacao
from ..schemas import UnidadeCreate, UnidadeUpdate, UnidadeResponse, Remocao
from ..services import unidades as unidades_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=dict,
    status_code=201,
    summary="Criar unidade",
)
async def criar_unidade(
    dados: UnidadeCreate,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.UNIDADE_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    unidade = await unidades_service.criar(db, dados, usuario.id)
    return {"status": "success", "data": UnidadeResponse.model_validate(unidade)}


@router.get(
    "",
    response_model=dict,
    summary="Listar unidades com paginação",
)
async def listar_unidades(
    pagina: int = Query(1, description="Número da página"),
    limite: int = Query(10, description="Itens por página"),
    busca: Optional[str] = Query(None, description="Busca por nome ou sigla"),
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.UNIDADE_LER)),
    db: AsyncSession = Depends(get_db),
):
    resultado = await unidades_service.buscar_tudo(db, pagina, limite, busca)
    return {"status": "success", "data": resultado}


@router.get(
    "/lista-completa",
    response_model=dict,
    summary="Listar todas as unidades (sem paginação)",
)
async def lista_completa(
    incluir_inativas: bool = Query(False, alias="includeInactive", description="Incluir unidades inativas"),
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.UNIDADE_LER)),
    db: AsyncSession = Depends(get_db),
):
    unidades = await unidades_service.lista_completa(db, incluir_inativas)
    return {"status": "success", "data": [UnidadeResponse.model_validate(u) for u in unidades]}


@router.get(
    "/{unidade_id}",
    response_model=dict,
    summary="Buscar unidade por ID",
)
async def buscar_por_id(
    unidade_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.UNIDADE_LER)),
    db: AsyncSession = Depends(get_db),
):
    unidade = await unidades_service.buscar_por_id(db, unidade_id)
    return {"status": "success", "data": UnidadeResponse.model_validate(unidade)}


@router.patch(
    "/{unidade_id}",
    response_model=dict,
    summary="Atualizar unidade",
)
async def atualizar_unidade(
    unidade_id: UUID,
    dados: UnidadeUpdate,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.UNIDADE_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    unidade = await unidades_service.atualizar(db, unidade_id, dados, usuario.id)
    return {"status": "success", "data": UnidadeResponse.model_validate(unidade)}


@router.patch(
    "/{unidade_id}/reativar",
    response_model=dict,
    summary="Reativar unidade inativa",
)
async def reativar_unidade(
    unidade_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.UNIDADE_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    unidade = await unidades_service.reativar(db, unidade_id, usuario.id)
    return {"status": "success", "data": UnidadeResponse.model_validate(unidade)}


@router.delete(
    "/{unidade_id}",
    response_model=dict,
    summary="Remover unidade (soft delete)",
)
async def remover_unidade(
    unidade_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.UNIDADE_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    resultado = await unidades_service.remover(db, unidade_id, usuario.id)
    return {"status": "success", "data": Remocao(**resultado)}
