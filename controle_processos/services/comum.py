"""
Helpers compartilhados pelos serviços
"""
import logging
import math
from datetime import date, datetime
from zoneinfo import ZoneInfo

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import settings
from ..exceptions import ConflitoError

logger = logging.getLogger(__name__)

# Maior OFFSET aceito pelos bancos (BIGINT com sinal)
OFFSET_MAXIMO = 2 ** 63 - 1


def hoje() -> date:
    """Data corrente no fuso configurado (comparação apenas por data)"""
    return datetime.now(ZoneInfo(settings.TIMEZONE)).date()


def normalizar_paginacao(pagina, limite) -> tuple[int, int]:
    """
    Converte pagina/limite para inteiros válidos.

    Valores ausentes ou não numéricos voltam ao padrão; pagina < 1 vira 1 e
    limite é limitado a [1, PAGINACAO_LIMITE_MAXIMO]. pagina é limitada
    para que o OFFSET resultante caiba em um BIGINT.
    """
    try:
        pagina = int(pagina)
    except (TypeError, ValueError):
        pagina = 1
    try:
        limite = int(limite)
    except (TypeError, ValueError):
        limite = settings.PAGINACAO_LIMITE_PADRAO

    if pagina < 1:
        pagina = 1
    if limite < 1:
        limite = settings.PAGINACAO_LIMITE_PADRAO
    limite = min(limite, settings.PAGINACAO_LIMITE_MAXIMO)
    pagina = min(pagina, OFFSET_MAXIMO // limite)
    return pagina, limite


def calcular_total_paginas(total: int, limite: int) -> int:
    return math.ceil(total / limite) if limite else 0


async def confirmar(db: AsyncSession, mensagem_conflito: str) -> None:
    """
    Commit da sessão. Uma violação dos índices únicos parciais (corrida entre
    a verificação e a escrita) vira ConflitoError.
    """
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Violação de integridade no commit: {e.orig}")
        raise ConflitoError(mensagem_conflito)
