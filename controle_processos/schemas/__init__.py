"""
Schemas Pydantic para validação e serialização
"""
from .erro import ErrorType, ErrorDetail
from .andamento import AndamentoCreate, AndamentoResponse
from .processo import (
    ProcessoCreate,
    ProcessoUpdate,
    BuscarProcessoFiltros,
    ProcessoResponse,
    ProcessoDetalheResponse,
    ProcessoPaginado,
    RespostaFinalCreate,
    Contagem,
    UnidadesResposta,
    Remocao,
)
from .interessado import InteressadoCreate, InteressadoUpdate, InteressadoResponse
from .unidade import UnidadeCreate, UnidadeUpdate, UnidadeResponse, UnidadePaginado

__all__ = [
    "ErrorType",
    "ErrorDetail",
    "AndamentoCreate",
    "AndamentoResponse",
    "ProcessoCreate",
    "ProcessoUpdate",
    "BuscarProcessoFiltros",
    "ProcessoResponse",
    "ProcessoDetalheResponse",
    "ProcessoPaginado",
    "RespostaFinalCreate",
    "Contagem",
    "UnidadesResposta",
    "Remocao",
    "InteressadoCreate",
    "InteressadoUpdate",
    "InteressadoResponse",
    "UnidadeCreate",
    "UnidadeUpdate",
    "UnidadeResponse",
    "UnidadePaginado",
]
