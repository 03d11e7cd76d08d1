"""
Schemas Pydantic para processos
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from .andamento import AndamentoResponse


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class ProcessoBase(BaseModel):
    assunto: Optional[str] = Field(None, description="Assunto do processo")
    origem: Optional[str] = Field(None, max_length=200, description="Origem do processo")
    observacoes: Optional[str] = Field(None, description="Observações livres")
    interessado_id: Optional[UUID] = Field(None, description="ID do interessado")
    unidade_remetente: Optional[str] = Field(None, max_length=200, examples=["COJUR"])
    unidade_destino: Optional[str] = Field(None, max_length=200)
    prazo: Optional[date] = Field(None, description="Data limite para resposta")
    prorrogacao: Optional[date] = Field(None, description="Data limite prorrogada")


class ProcessoCreate(ProcessoBase):
    numero_sei: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Número SEI do processo",
        examples=["00002.012041/2025-95"]
    )

    @field_validator('numero_sei', mode='before')
    @classmethod
    def strip_numero(cls, v: str) -> str:
        return _strip(v)


class ProcessoUpdate(ProcessoBase):
    numero_sei: Optional[str] = Field(None, min_length=1, max_length=50)

    @field_validator('numero_sei', mode='before')
    @classmethod
    def strip_numero(cls, v: Optional[str]) -> Optional[str]:
        return _strip(v)


class BuscarProcessoFiltros(BaseModel):
    """Parâmetros aceitos na busca de processos"""
    pagina: int = 1
    limite: int = 10
    busca: Optional[str] = None
    interessado: Optional[str] = None
    unidade_remetente: Optional[str] = None
    unidade_destino: Optional[str] = None
    vencendo_hoje: bool = False
    atrasados: bool = False
    concluidos: bool = False

    @field_validator('busca', 'interessado', 'unidade_remetente', 'unidade_destino', mode='before')
    @classmethod
    def termo_vazio(cls, v: Optional[str]) -> Optional[str]:
        v = _strip(v)
        return v or None


class ProcessoResponse(BaseModel):
    id: UUID
    numero_sei: str
    assunto: Optional[str] = None
    origem: Optional[str] = None
    observacoes: Optional[str] = None
    interessado_id: Optional[UUID] = None
    interessado: Optional[str] = Field(None, validation_alias="interessado_nome")
    unidade_remetente: Optional[str] = None
    unidade_destino: Optional[str] = None
    prazo: Optional[date] = None
    prorrogacao: Optional[date] = None
    concluido: bool = False
    resposta_final: Optional[str] = None
    unidade_resposta_final: Optional[str] = None
    data_resposta_final: Optional[datetime] = None
    criado_por: Optional[str] = None
    criado_em: datetime
    atualizado_em: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ProcessoDetalheResponse(ProcessoResponse):
    andamentos: list[AndamentoResponse] = []


class ProcessoPaginado(BaseModel):
    dados: list[ProcessoResponse]
    total: int = Field(..., ge=0, description="Total de processos encontrados")
    pagina: int = Field(..., ge=1)
    limite: int = Field(..., ge=1)
    total_paginas: int = Field(..., ge=0)


class RespostaFinalCreate(BaseModel):
    processo_id: UUID
    unidade: str = Field(..., min_length=1, max_length=200, description="Unidade que responde")
    resposta: str = Field(..., min_length=1, description="Texto da resposta final")


class Contagem(BaseModel):
    total: int = Field(..., ge=0)


class UnidadesResposta(BaseModel):
    unidades: list[str]


class Remocao(BaseModel):
    removido: bool
