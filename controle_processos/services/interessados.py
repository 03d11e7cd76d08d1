"""
Serviço de interessados
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ConflitoError, NaoEncontradoError
from ..models import Interessado, Processo, SituacaoRegistro
from ..schemas import InteressadoCreate, InteressadoUpdate
from .comum import confirmar
from .logs import registrar_log

logger = logging.getLogger(__name__)

ENTIDADE = "interessado"


async def lista_completa(db: AsyncSession) -> list[Interessado]:
    result = await db.execute(
        select(Interessado)
        .where(Interessado.situacao == SituacaoRegistro.ATIVO)
        .order_by(Interessado.valor.asc())
    )
    return list(result.scalars().all())


async def buscar_por_termo(db: AsyncSession, termo: str) -> list[Interessado]:
    """Autocomplete: até 10 interessados ativos contendo o termo"""
    result = await db.execute(
        select(Interessado)
        .where(and_(
            Interessado.valor.icontains(termo.strip(), autoescape=True),
            Interessado.situacao == SituacaoRegistro.ATIVO,
        ))
        .order_by(Interessado.valor.asc())
        .limit(10)
    )
    return list(result.scalars().all())


async def obter_ativo(db: AsyncSession, interessado_id: UUID) -> Interessado:
    result = await db.execute(
        select(Interessado)
        .where(and_(Interessado.id == interessado_id, Interessado.situacao == SituacaoRegistro.ATIVO))
        .execution_options(populate_existing=True)
    )
    interessado = result.scalar_one_or_none()
    if not interessado:
        raise NaoEncontradoError("Interessado não encontrado.", {"id": str(interessado_id)})
    return interessado


async def _existe_ativo_com_valor(db: AsyncSession, valor: str, ignorar_id: Optional[UUID] = None) -> bool:
    conditions = [Interessado.valor == valor, Interessado.situacao == SituacaoRegistro.ATIVO]
    if ignorar_id is not None:
        conditions.append(Interessado.id != ignorar_id)
    result = await db.execute(select(Interessado.id).where(and_(*conditions)))
    return result.first() is not None


async def criar(db: AsyncSession, dados: InteressadoCreate, usuario_id: Optional[str] = None) -> Interessado:
    valor = dados.valor.strip()
    if await _existe_ativo_com_valor(db, valor):
        raise ConflitoError("Já existe um interessado com este nome.", {"valor": valor})

    interessado = Interessado(valor=valor)
    db.add(interessado)
    await confirmar(db, "Já existe um interessado com este nome.")

    logger.info(f"Interessado criado: valor={valor}")
    await registrar_log("CRIAR", ENTIDADE, interessado.id, usuario_id, {"valor": valor})

    return await obter_ativo(db, interessado.id)


async def atualizar(
    db: AsyncSession, interessado_id: UUID, dados: InteressadoUpdate, usuario_id: Optional[str] = None
) -> Interessado:
    interessado = await obter_ativo(db, interessado_id)

    if dados.valor:
        valor = dados.valor.strip()
        if await _existe_ativo_com_valor(db, valor, ignorar_id=interessado_id):
            raise ConflitoError("Já existe outro interessado com este nome.", {"valor": valor})
        interessado.valor = valor
        interessado.tocar()
        await confirmar(db, "Já existe outro interessado com este nome.")
        logger.info(f"Interessado atualizado: id={interessado_id}")
        await registrar_log("ATUALIZAR", ENTIDADE, interessado_id, usuario_id, {"valor": valor})

    return await obter_ativo(db, interessado_id)


async def contar_processos_vinculados(db: AsyncSession, interessado_id: UUID) -> int:
    result = await db.execute(
        select(func.count()).select_from(Processo).where(and_(
            Processo.interessado_id == interessado_id,
            Processo.situacao == SituacaoRegistro.ATIVO,
        ))
    )
    return result.scalar() or 0


async def remover(db: AsyncSession, interessado_id: UUID, usuario_id: Optional[str] = None) -> dict:
    """Soft delete, bloqueado enquanto houver processos ativos vinculados"""
    interessado = await obter_ativo(db, interessado_id)

    vinculados = await contar_processos_vinculados(db, interessado_id)
    if vinculados > 0:
        raise ConflitoError(
            f"Não é possível remover este interessado pois existem {vinculados} "
            f"processo(s) ativo(s) vinculado(s).",
            {"processos_vinculados": vinculados},
        )

    interessado.soft_delete()
    await db.commit()

    logger.info(f"Interessado removido: id={interessado_id}")
    await registrar_log("REMOVER", ENTIDADE, interessado_id, usuario_id)

    return {"removido": True}
