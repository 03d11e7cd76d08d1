"""
Serviço de andamentos de processos
"""
import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NaoEncontradoError, TransicaoInvalidaError
from ..models import Andamento
from ..schemas import AndamentoCreate
from . import processos as processos_service
from .logs import registrar_log

logger = logging.getLogger(__name__)

ENTIDADE = "andamento"


async def listar(db: AsyncSession, processo_id: UUID) -> list[Andamento]:
    processo = await processos_service.obter_ativo(db, processo_id)
    return list(processo.andamentos)


async def _obter(db: AsyncSession, processo_id: UUID, andamento_id: UUID) -> Andamento:
    result = await db.execute(
        select(Andamento)
        .where(and_(Andamento.id == andamento_id, Andamento.processo_id == processo_id))
        .execution_options(populate_existing=True)
    )
    andamento = result.scalar_one_or_none()
    if not andamento:
        raise NaoEncontradoError("Andamento não encontrado.", {"id": str(andamento_id)})
    return andamento


async def criar(
    db: AsyncSession, processo_id: UUID, dados: AndamentoCreate, usuario_id: Optional[str] = None
) -> Andamento:
    await processos_service.obter_ativo(db, processo_id)

    andamento = Andamento(processo_id=processo_id, criado_por=usuario_id, **dados.model_dump())
    db.add(andamento)
    await db.commit()

    logger.info(f"Andamento criado: processo={processo_id}, usuario={usuario_id}")
    await registrar_log("CRIAR", ENTIDADE, andamento.id, usuario_id, {"processo_id": str(processo_id)})

    return await _obter(db, processo_id, andamento.id)


async def concluir(
    db: AsyncSession, processo_id: UUID, andamento_id: UUID, usuario_id: Optional[str] = None
) -> Andamento:
    await processos_service.obter_ativo(db, processo_id)
    andamento = await _obter(db, processo_id, andamento_id)
    if andamento.concluido:
        raise TransicaoInvalidaError("Andamento já está concluído.", {"id": str(andamento_id)})

    andamento.concluido = True
    andamento.atualizado_em = datetime.utcnow()
    await db.commit()

    logger.info(f"Andamento concluído: id={andamento_id}, usuario={usuario_id}")
    await registrar_log("CONCLUIR", ENTIDADE, andamento_id, usuario_id, {"processo_id": str(processo_id)})

    return await _obter(db, processo_id, andamento_id)
