"""
Models do banco de dados
"""
from .situacao import SituacaoRegistro
from .processo import Processo
from .andamento import Andamento
from .interessado import Interessado
from .unidade import Unidade
from .log_acao import LogAcao

__all__ = [
    "SituacaoRegistro",
    "Processo",
    "Andamento",
    "Interessado",
    "Unidade",
    "LogAcao",
]
