"""
Registro das ações dos usuários (log de auditoria)
"""
import logging
from typing import Any, Optional

from .. import database
from ..models import LogAcao

logger = logging.getLogger(__name__)


async def registrar_log(
    acao: str,
    entidade: str,
    entidade_id: Optional[Any] = None,
    usuario_id: Optional[str] = None,
    detalhes: Optional[dict] = None,
) -> None:
    """
    Grava um LogAcao em sessão própria.

    Chamado depois do commit da operação principal; uma falha aqui é
    apenas registrada e nunca propaga.
    """
    try:
        async with database.AsyncSessionLocal() as session:
            session.add(LogAcao(
                acao=acao,
                entidade=entidade,
                entidade_id=str(entidade_id) if entidade_id is not None else None,
                usuario_id=usuario_id,
                detalhes=detalhes,
            ))
            await session.commit()
    except Exception as e:
        logger.warning(f"Falha ao registrar log: acao={acao}, entidade={entidade}, erro={e}")
