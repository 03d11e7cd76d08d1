"""
Rotas para cadastro, busca e acompanhamento de processos
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID
import logging

from ..auth import UsuarioAtual, exigir_permissao
from ..database import get_db
from ..permissoes import Operacao
from ..schemas import (
    AndamentoCreate,
    AndamentoResponse,
    BuscarProcessoFiltros,
    Contagem,
    ProcessoCreate,
    ProcessoDetalheResponse,
    ProcessoUpdate,
    Remocao,
    RespostaFinalCreate,
    UnidadesResposta,
)
from ..services import andamentos as andamentos_service
from ..services import processos as processos_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/origens/autocomplete",
    response_model=dict,
    summary="Autocomplete de origem",
)
async def autocomplete_origens(
    q: Optional[str] = Query(None, description="Termo digitado"),
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_LER)),
    db: AsyncSession = Depends(get_db),
):
    origens = await processos_service.autocomplete_origens(db, q)
    return {"status": "success", "data": origens}


@router.post(
    "",
    response_model=dict,
    status_code=201,
    summary="Criar processo",
)
async def criar_processo(
    dados: ProcessoCreate,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_CRIAR)),
    db: AsyncSession = Depends(get_db),
):
    processo = await processos_service.criar(db, dados, usuario.id)
    return {"status": "success", "data": ProcessoDetalheResponse.model_validate(processo)}


@router.get(
    "",
    response_model=dict,
    summary="Listar processos com paginação e filtros",
    description=(
        "Busca geral em todos os campos do processo e andamentos, buscas "
        "específicas (interessado, unidade remetente e destino) e filtros "
        "rápidos combináveis (vencendo hoje, atrasados, concluídos)"
    ),
)
async def listar_processos(
    pagina: int = Query(1, description="Número da página"),
    limite: int = Query(10, description="Itens por página"),
    busca: Optional[str] = Query(None, description="Termo de busca geral"),
    interessado: Optional[str] = Query(None, description="Busca no nome do interessado"),
    unidade_remetente: Optional[str] = Query(None, alias="unidadeRemetente"),
    unidade_destino: Optional[str] = Query(None, alias="unidadeDestino"),
    vencendo_hoje: bool = Query(False, alias="vencendoHoje"),
    atrasados: bool = Query(False),
    concluidos: bool = Query(False),
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_LER)),
    db: AsyncSession = Depends(get_db),
):
    filtros = BuscarProcessoFiltros(
        pagina=pagina,
        limite=limite,
        busca=busca,
        interessado=interessado,
        unidade_remetente=unidade_remetente,
        unidade_destino=unidade_destino,
        vencendo_hoje=vencendo_hoje,
        atrasados=atrasados,
        concluidos=concluidos,
    )
    resultado = await processos_service.buscar_tudo(db, filtros, usuario.id)
    return {"status": "success", "data": resultado}


@router.get(
    "/contar/vencendo-hoje",
    response_model=dict,
    summary="Contar processos vencendo hoje",
)
async def contar_vencendo_hoje(
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_LER)),
    db: AsyncSession = Depends(get_db),
):
    total = await processos_service.contar_vencendo_hoje(db, usuario.id)
    return {"status": "success", "data": Contagem(total=total)}


@router.get(
    "/contar/atrasados",
    response_model=dict,
    summary="Contar processos atrasados",
)
async def contar_atrasados(
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_LER)),
    db: AsyncSession = Depends(get_db),
):
    total = await processos_service.contar_atrasados(db, usuario.id)
    return {"status": "success", "data": Contagem(total=total)}


@router.get(
    "/numero-sei/{numero_sei:path}",
    response_model=dict,
    summary="Buscar processo por número SEI",
)
async def buscar_por_numero_sei(
    numero_sei: str,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_LER)),
    db: AsyncSession = Depends(get_db),
):
    processo = await processos_service.buscar_por_numero_sei(db, numero_sei, usuario.id)
    return {"status": "success", "data": ProcessoDetalheResponse.model_validate(processo)}


@router.post(
    "/resposta-final",
    response_model=dict,
    status_code=201,
    summary="Registrar resposta final de um processo",
)
async def criar_resposta_final(
    dados: RespostaFinalCreate,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_RESPONDER)),
    db: AsyncSession = Depends(get_db),
):
    processo = await processos_service.criar_resposta_final(db, dados, usuario.id)
    return {"status": "success", "data": ProcessoDetalheResponse.model_validate(processo)}


@router.get(
    "/{processo_id}/unidades-resposta",
    response_model=dict,
    summary="Unidades disponíveis para resposta final",
)
async def buscar_unidades_resposta(
    processo_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_RESPONDER)),
    db: AsyncSession = Depends(get_db),
):
    unidades = await processos_service.buscar_unidades_resposta(db, processo_id)
    return {"status": "success", "data": UnidadesResposta(unidades=unidades)}


@router.get(
    "/{processo_id}/andamentos",
    response_model=dict,
    summary="Listar andamentos do processo",
)
async def listar_andamentos(
    processo_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.ANDAMENTO_LER)),
    db: AsyncSession = Depends(get_db),
):
    andamentos = await andamentos_service.listar(db, processo_id)
    return {"status": "success", "data": [AndamentoResponse.model_validate(a) for a in andamentos]}


@router.post(
    "/{processo_id}/andamentos",
    response_model=dict,
    status_code=201,
    summary="Registrar andamento",
)
async def criar_andamento(
    processo_id: UUID,
    dados: AndamentoCreate,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.ANDAMENTO_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    andamento = await andamentos_service.criar(db, processo_id, dados, usuario.id)
    return {"status": "success", "data": AndamentoResponse.model_validate(andamento)}


@router.patch(
    "/{processo_id}/andamentos/{andamento_id}/concluir",
    response_model=dict,
    summary="Concluir andamento",
)
async def concluir_andamento(
    processo_id: UUID,
    andamento_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.ANDAMENTO_ESCREVER)),
    db: AsyncSession = Depends(get_db),
):
    andamento = await andamentos_service.concluir(db, processo_id, andamento_id, usuario.id)
    return {"status": "success", "data": AndamentoResponse.model_validate(andamento)}


@router.get(
    "/{processo_id}",
    response_model=dict,
    summary="Buscar processo por ID",
)
async def buscar_por_id(
    processo_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_LER)),
    db: AsyncSession = Depends(get_db),
):
    processo = await processos_service.buscar_por_id(db, processo_id, usuario.id)
    return {"status": "success", "data": ProcessoDetalheResponse.model_validate(processo)}


@router.patch(
    "/{processo_id}",
    response_model=dict,
    summary="Atualizar processo",
)
async def atualizar_processo(
    processo_id: UUID,
    dados: ProcessoUpdate,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_ATUALIZAR)),
    db: AsyncSession = Depends(get_db),
):
    processo = await processos_service.atualizar(db, processo_id, dados, usuario.id)
    return {"status": "success", "data": ProcessoDetalheResponse.model_validate(processo)}


@router.delete(
    "/{processo_id}",
    response_model=dict,
    summary="Remover processo (soft delete)",
)
async def remover_processo(
    processo_id: UUID,
    usuario: UsuarioAtual = Depends(exigir_permissao(Operacao.PROCESSO_REMOVER)),
    db: AsyncSession = Depends(get_db),
):
    resultado = await processos_service.remover(db, processo_id, usuario.id)
    return {"status": "success", "data": Remocao(**resultado)}
