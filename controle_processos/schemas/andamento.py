"""
Schemas Pydantic para andamentos
"""
from pydantic import BaseModel, Field, ConfigDict
from datetime import date, datetime
from typing import Optional
from uuid import UUID


class AndamentoCreate(BaseModel):
    origem: Optional[str] = Field(None, max_length=200, description="Unidade de origem")
    destino: Optional[str] = Field(None, max_length=200, description="Unidade de destino")
    descricao: Optional[str] = Field(None, description="Descrição do andamento")
    observacoes: Optional[str] = None
    prazo: Optional[date] = None
    concluido: bool = False


class AndamentoResponse(BaseModel):
    id: UUID
    processo_id: UUID
    origem: Optional[str] = None
    destino: Optional[str] = None
    descricao: Optional[str] = None
    observacoes: Optional[str] = None
    prazo: Optional[date] = None
    concluido: bool
    criado_por: Optional[str] = None
    criado_em: datetime

    model_config = ConfigDict(from_attributes=True)
