"""
Serviço de processos: motor de busca/filtros e operações de cadastro
"""
import logging
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import select, func, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ConflitoError, NaoEncontradoError, ValidacaoError
from ..models import Processo, Andamento, Interessado, SituacaoRegistro
from ..schemas import (
    BuscarProcessoFiltros,
    ProcessoCreate,
    ProcessoUpdate,
    ProcessoResponse,
    ProcessoPaginado,
    RespostaFinalCreate,
)
from . import interessados as interessados_service
from .comum import hoje, normalizar_paginacao, calcular_total_paginas, confirmar
from .logs import registrar_log

logger = logging.getLogger(__name__)

ENTIDADE = "processo"
MSG_NUMERO_DUPLICADO = "Já existe um processo ativo com este número SEI."


# --- Predicados ---

def filtro_ativo():
    return Processo.situacao == SituacaoRegistro.ATIVO


def filtro_concluido():
    return Processo.andamentos.any(Andamento.concluido.is_(True))


def filtro_vencendo_hoje(dia: date):
    return or_(Processo.prazo == dia, Processo.prorrogacao == dia)


def filtro_atrasados(dia: date):
    return and_(
        or_(Processo.prazo < dia, Processo.prorrogacao < dia),
        ~filtro_concluido(),
    )


def filtro_busca_geral(termo: str):
    """Termo contido em qualquer campo do processo, do interessado ou dos andamentos"""
    return or_(
        Processo.numero_sei.icontains(termo, autoescape=True),
        Processo.assunto.icontains(termo, autoescape=True),
        Processo.origem.icontains(termo, autoescape=True),
        Processo.observacoes.icontains(termo, autoescape=True),
        Processo.unidade_remetente.icontains(termo, autoescape=True),
        Processo.unidade_destino.icontains(termo, autoescape=True),
        Processo.interessado.has(Interessado.valor.icontains(termo, autoescape=True)),
        Processo.andamentos.any(or_(
            Andamento.origem.icontains(termo, autoescape=True),
            Andamento.destino.icontains(termo, autoescape=True),
            Andamento.descricao.icontains(termo, autoescape=True),
            Andamento.observacoes.icontains(termo, autoescape=True),
        )),
    )


def construir_filtros(filtros: BuscarProcessoFiltros, dia: date) -> list:
    conditions = [filtro_ativo()]

    if filtros.busca:
        conditions.append(filtro_busca_geral(filtros.busca))
    if filtros.interessado:
        conditions.append(
            Processo.interessado.has(Interessado.valor.icontains(filtros.interessado, autoescape=True))
        )
    if filtros.unidade_remetente:
        conditions.append(Processo.unidade_remetente.icontains(filtros.unidade_remetente, autoescape=True))
    if filtros.unidade_destino:
        conditions.append(Processo.unidade_destino.icontains(filtros.unidade_destino, autoescape=True))

    if filtros.vencendo_hoje:
        conditions.append(filtro_vencendo_hoje(dia))
    if filtros.atrasados:
        conditions.append(filtro_atrasados(dia))
    if filtros.concluidos:
        conditions.append(filtro_concluido())

    return conditions


# --- Consultas ---

async def buscar_tudo(
    db: AsyncSession,
    filtros: BuscarProcessoFiltros,
    usuario_id: Optional[str] = None,
    dia: Optional[date] = None,
) -> ProcessoPaginado:
    """
    Lista paginada de processos ativos aplicando os filtros.

    usuario_id é aceito para um futuro escopo por usuário e hoje não
    altera a consulta.
    """
    pagina, limite = normalizar_paginacao(filtros.pagina, filtros.limite)
    conditions = construir_filtros(filtros, dia or hoje())

    count_query = select(func.count()).select_from(Processo).where(and_(*conditions))
    total = (await db.execute(count_query)).scalar() or 0

    query = (
        select(Processo)
        .where(and_(*conditions))
        .order_by(Processo.criado_em.desc(), Processo.id.desc())
        .limit(limite)
        .offset((pagina - 1) * limite)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    processos = result.scalars().all()

    return ProcessoPaginado(
        dados=[ProcessoResponse.model_validate(p) for p in processos],
        total=total,
        pagina=pagina,
        limite=limite,
        total_paginas=calcular_total_paginas(total, limite),
    )


async def _contar(db: AsyncSession, *conditions) -> int:
    query = select(func.count()).select_from(Processo).where(and_(filtro_ativo(), *conditions))
    return (await db.execute(query)).scalar() or 0


async def contar_vencendo_hoje(
    db: AsyncSession, usuario_id: Optional[str] = None, dia: Optional[date] = None
) -> int:
    return await _contar(db, filtro_vencendo_hoje(dia or hoje()))


async def contar_atrasados(
    db: AsyncSession, usuario_id: Optional[str] = None, dia: Optional[date] = None
) -> int:
    return await _contar(db, filtro_atrasados(dia or hoje()))


async def obter_ativo(db: AsyncSession, processo_id: UUID) -> Processo:
    result = await db.execute(
        select(Processo)
        .where(and_(Processo.id == processo_id, filtro_ativo()))
        .execution_options(populate_existing=True)
    )
    processo = result.scalar_one_or_none()
    if not processo:
        raise NaoEncontradoError("Processo não encontrado.", {"id": str(processo_id)})
    return processo


async def buscar_por_id(db: AsyncSession, processo_id: UUID, usuario_id: Optional[str] = None) -> Processo:
    return await obter_ativo(db, processo_id)


async def buscar_por_numero_sei(db: AsyncSession, numero_sei: str, usuario_id: Optional[str] = None) -> Processo:
    result = await db.execute(
        select(Processo)
        .where(and_(Processo.numero_sei == numero_sei.strip(), filtro_ativo()))
        .execution_options(populate_existing=True)
    )
    processo = result.scalar_one_or_none()
    if not processo:
        raise NaoEncontradoError("Processo não encontrado.", {"numero_sei": numero_sei})
    return processo


async def autocomplete_origens(db: AsyncSession, termo: Optional[str]) -> list[str]:
    conditions = [filtro_ativo(), Processo.origem.isnot(None), Processo.origem != ""]
    if termo and termo.strip():
        conditions.append(Processo.origem.icontains(termo.strip(), autoescape=True))

    query = (
        select(Processo.origem)
        .where(and_(*conditions))
        .distinct()
        .order_by(Processo.origem.asc())
        .limit(10)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def buscar_unidades_resposta(db: AsyncSession, processo_id: UUID) -> list[str]:
    """Unidades de destino dos andamentos, na ordem em que aparecem"""
    processo = await obter_ativo(db, processo_id)
    return _unidades_dos_andamentos(processo)


def _unidades_dos_andamentos(processo: Processo) -> list[str]:
    unidades: list[str] = []
    for andamento in processo.andamentos:
        if andamento.destino and andamento.destino not in unidades:
            unidades.append(andamento.destino)
    return unidades


# --- Escrita ---

async def _garantir_numero_sei_unico(
    db: AsyncSession, numero_sei: str, ignorar_id: Optional[UUID] = None
) -> None:
    conditions = [Processo.numero_sei == numero_sei, filtro_ativo()]
    if ignorar_id is not None:
        conditions.append(Processo.id != ignorar_id)
    existente = await db.execute(select(Processo.id).where(and_(*conditions)))
    if existente.first():
        raise ConflitoError(MSG_NUMERO_DUPLICADO, {"numero_sei": numero_sei})


async def criar(db: AsyncSession, dados: ProcessoCreate, usuario_id: Optional[str] = None) -> Processo:
    await _garantir_numero_sei_unico(db, dados.numero_sei)
    if dados.interessado_id is not None:
        await interessados_service.obter_ativo(db, dados.interessado_id)

    processo = Processo(**dados.model_dump(), criado_por=usuario_id)
    db.add(processo)
    await confirmar(db, MSG_NUMERO_DUPLICADO)

    logger.info(f"Processo criado: numero_sei={processo.numero_sei}, usuario={usuario_id}")
    await registrar_log("CRIAR", ENTIDADE, processo.id, usuario_id, {"numero_sei": processo.numero_sei})

    return await obter_ativo(db, processo.id)


async def atualizar(
    db: AsyncSession, processo_id: UUID, dados: ProcessoUpdate, usuario_id: Optional[str] = None
) -> Processo:
    processo = await obter_ativo(db, processo_id)
    alteracoes = dados.model_dump(exclude_unset=True)

    if alteracoes.get("numero_sei") is None:
        alteracoes.pop("numero_sei", None)
    elif alteracoes["numero_sei"] != processo.numero_sei:
        await _garantir_numero_sei_unico(db, alteracoes["numero_sei"], ignorar_id=processo_id)

    if alteracoes.get("interessado_id") is not None:
        await interessados_service.obter_ativo(db, alteracoes["interessado_id"])

    for campo, valor in alteracoes.items():
        setattr(processo, campo, valor)
    processo.tocar()
    await confirmar(db, MSG_NUMERO_DUPLICADO)

    logger.info(f"Processo atualizado: id={processo_id}, usuario={usuario_id}")
    await registrar_log("ATUALIZAR", ENTIDADE, processo_id, usuario_id, {"campos": sorted(alteracoes)})

    return await obter_ativo(db, processo_id)


async def remover(db: AsyncSession, processo_id: UUID, usuario_id: Optional[str] = None) -> dict:
    processo = await obter_ativo(db, processo_id)
    processo.soft_delete()
    await db.commit()

    logger.info(f"Processo removido: id={processo_id}, usuario={usuario_id}")
    await registrar_log("REMOVER", ENTIDADE, processo_id, usuario_id, {"numero_sei": processo.numero_sei})

    return {"removido": True}


async def criar_resposta_final(
    db: AsyncSession, dados: RespostaFinalCreate, usuario_id: Optional[str] = None
) -> Processo:
    """
    Registra a resposta final de uma unidade e conclui os andamentos
    endereçados a ela.
    """
    processo = await obter_ativo(db, dados.processo_id)

    if not processo.andamentos:
        raise ValidacaoError("Processo não possui andamentos.", {"id": str(processo.id)})
    if processo.resposta_final:
        raise ConflitoError("Processo já possui resposta final.", {"id": str(processo.id)})

    unidades = _unidades_dos_andamentos(processo)
    unidade = dados.unidade.strip()
    if unidade not in unidades:
        raise ValidacaoError(
            "Unidade não está entre as unidades disponíveis para resposta.",
            {"unidade": unidade, "unidades": unidades},
        )

    agora = datetime.utcnow()
    processo.resposta_final = dados.resposta
    processo.unidade_resposta_final = unidade
    processo.data_resposta_final = agora
    processo.respondido_por = usuario_id
    processo.tocar()
    for andamento in processo.andamentos:
        if andamento.destino == unidade and not andamento.concluido:
            andamento.concluido = True
            andamento.atualizado_em = agora
    await db.commit()

    logger.info(f"Resposta final registrada: processo={processo.id}, unidade={unidade}, usuario={usuario_id}")
    await registrar_log("RESPOSTA_FINAL", ENTIDADE, processo.id, usuario_id, {"unidade": unidade})

    return await obter_ativo(db, processo.id)
