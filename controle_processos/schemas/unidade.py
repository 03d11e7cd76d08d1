"""
Schemas Pydantic para unidades
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from typing import Optional
from uuid import UUID


class UnidadeCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=200, description="Nome da unidade")
    sigla: Optional[str] = Field(None, max_length=30, examples=["COJUR"])

    @field_validator('nome', 'sigla', mode='before')
    @classmethod
    def strip(cls, v):
        return v.strip() if isinstance(v, str) else v


class UnidadeUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=200)
    sigla: Optional[str] = Field(None, max_length=30)

    @field_validator('nome', 'sigla', mode='before')
    @classmethod
    def strip(cls, v):
        return v.strip() if isinstance(v, str) else v


class UnidadeResponse(BaseModel):
    id: UUID
    nome: str
    sigla: Optional[str] = None
    ativo: bool
    criado_em: datetime
    atualizado_em: datetime

    model_config = ConfigDict(from_attributes=True)


class UnidadePaginado(BaseModel):
    dados: list[UnidadeResponse]
    total: int = Field(..., ge=0)
    pagina: int = Field(..., ge=1)
    limite: int = Field(..., ge=1)
    total_paginas: int = Field(..., ge=0)
