"""
Serviço de unidades organizacionais
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select, func, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ConflitoError, NaoEncontradoError, TransicaoInvalidaError
from ..models import Unidade, Processo, SituacaoRegistro
from ..schemas import UnidadeCreate, UnidadeUpdate, UnidadeResponse, UnidadePaginado
from .comum import normalizar_paginacao, calcular_total_paginas, confirmar
from .logs import registrar_log

logger = logging.getLogger(__name__)

ENTIDADE = "unidade"
MSG_NOME_DUPLICADO = "Já existe uma unidade ativa com este nome."


def _ativa():
    return Unidade.situacao == SituacaoRegistro.ATIVO


async def buscar_tudo(
    db: AsyncSession, pagina=1, limite=10, busca: Optional[str] = None
) -> UnidadePaginado:
    pagina, limite = normalizar_paginacao(pagina, limite)

    conditions = [_ativa()]
    if busca and busca.strip():
        termo = busca.strip()
        conditions.append(or_(
            Unidade.nome.icontains(termo, autoescape=True),
            Unidade.sigla.icontains(termo, autoescape=True),
        ))

    total = (await db.execute(
        select(func.count()).select_from(Unidade).where(and_(*conditions))
    )).scalar() or 0

    result = await db.execute(
        select(Unidade)
        .where(and_(*conditions))
        .order_by(Unidade.nome.asc(), Unidade.id.asc())
        .limit(limite)
        .offset((pagina - 1) * limite)
    )

    return UnidadePaginado(
        dados=[UnidadeResponse.model_validate(u) for u in result.scalars().all()],
        total=total,
        pagina=pagina,
        limite=limite,
        total_paginas=calcular_total_paginas(total, limite),
    )


async def lista_completa(db: AsyncSession, incluir_inativas: bool = False) -> list[Unidade]:
    query = select(Unidade).order_by(Unidade.nome.asc())
    if not incluir_inativas:
        query = query.where(_ativa())
    result = await db.execute(query)
    return list(result.scalars().all())


async def _obter(db: AsyncSession, unidade_id: UUID, somente_ativa: bool = True) -> Unidade:
    conditions = [Unidade.id == unidade_id]
    if somente_ativa:
        conditions.append(_ativa())
    result = await db.execute(
        select(Unidade).where(and_(*conditions)).execution_options(populate_existing=True)
    )
    unidade = result.scalar_one_or_none()
    if not unidade:
        raise NaoEncontradoError("Unidade não encontrada.", {"id": str(unidade_id)})
    return unidade


async def buscar_por_id(db: AsyncSession, unidade_id: UUID) -> Unidade:
    return await _obter(db, unidade_id)


async def _garantir_nome_unico(db: AsyncSession, nome: str, ignorar_id: Optional[UUID] = None) -> None:
    conditions = [Unidade.nome == nome, _ativa()]
    if ignorar_id is not None:
        conditions.append(Unidade.id != ignorar_id)
    existente = await db.execute(select(Unidade.id).where(and_(*conditions)))
    if existente.first():
        raise ConflitoError(MSG_NOME_DUPLICADO, {"nome": nome})


async def criar(db: AsyncSession, dados: UnidadeCreate, usuario_id: Optional[str] = None) -> Unidade:
    await _garantir_nome_unico(db, dados.nome)

    unidade = Unidade(nome=dados.nome, sigla=dados.sigla)
    db.add(unidade)
    await confirmar(db, MSG_NOME_DUPLICADO)

    logger.info(f"Unidade criada: nome={dados.nome}")
    await registrar_log("CRIAR", ENTIDADE, unidade.id, usuario_id, {"nome": dados.nome})

    return await _obter(db, unidade.id)


async def atualizar(
    db: AsyncSession, unidade_id: UUID, dados: UnidadeUpdate, usuario_id: Optional[str] = None
) -> Unidade:
    unidade = await _obter(db, unidade_id)
    alteracoes = dados.model_dump(exclude_unset=True)

    if alteracoes.get("nome") is None:
        alteracoes.pop("nome", None)
    elif alteracoes["nome"] != unidade.nome:
        await _garantir_nome_unico(db, alteracoes["nome"], ignorar_id=unidade_id)
        vinculados = await contar_processos_vinculados(db, unidade.nome)
        if vinculados > 0:
            raise ConflitoError(
                f"Não é possível renomear esta unidade pois existem {vinculados} "
                f"processo(s) ativo(s) vinculado(s).",
                {"processos_vinculados": vinculados},
            )

    for campo, valor in alteracoes.items():
        setattr(unidade, campo, valor)
    unidade.tocar()
    await confirmar(db, MSG_NOME_DUPLICADO)

    logger.info(f"Unidade atualizada: id={unidade_id}")
    await registrar_log("ATUALIZAR", ENTIDADE, unidade_id, usuario_id, {"campos": sorted(alteracoes)})

    return await _obter(db, unidade_id)


async def reativar(db: AsyncSession, unidade_id: UUID, usuario_id: Optional[str] = None) -> Unidade:
    """Transição inativo -> ativo"""
    unidade = await _obter(db, unidade_id, somente_ativa=False)
    if unidade.ativo:
        raise TransicaoInvalidaError("Unidade já está ativa.", {"id": str(unidade_id)})

    await _garantir_nome_unico(db, unidade.nome, ignorar_id=unidade_id)
    unidade.restore()
    unidade.tocar()
    await confirmar(db, MSG_NOME_DUPLICADO)

    logger.info(f"Unidade reativada: id={unidade_id}")
    await registrar_log("REATIVAR", ENTIDADE, unidade_id, usuario_id)

    return await _obter(db, unidade_id)


async def contar_processos_vinculados(db: AsyncSession, nome: str) -> int:
    result = await db.execute(
        select(func.count()).select_from(Processo).where(and_(
            Processo.situacao == SituacaoRegistro.ATIVO,
            or_(Processo.unidade_remetente == nome, Processo.unidade_destino == nome),
        ))
    )
    return result.scalar() or 0


async def remover(db: AsyncSession, unidade_id: UUID, usuario_id: Optional[str] = None) -> dict:
    unidade = await _obter(db, unidade_id)

    vinculados = await contar_processos_vinculados(db, unidade.nome)
    if vinculados > 0:
        raise ConflitoError(
            f"Não é possível remover esta unidade pois existem {vinculados} "
            f"processo(s) ativo(s) vinculado(s).",
            {"processos_vinculados": vinculados},
        )

    unidade.soft_delete()
    await db.commit()

    logger.info(f"Unidade removida: id={unidade_id}")
    await registrar_log("REMOVER", ENTIDADE, unidade_id, usuario_id)

    return {"removido": True}
