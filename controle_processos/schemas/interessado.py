"""
Schemas Pydantic para interessados
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from typing import Optional
from uuid import UUID


class InteressadoCreate(BaseModel):
    valor: str = Field(..., min_length=1, max_length=300, description="Nome do interessado", examples=["João Silva"])

    @field_validator('valor', mode='before')
    @classmethod
    def strip_valor(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class InteressadoUpdate(BaseModel):
    valor: Optional[str] = Field(None, min_length=1, max_length=300)

    @field_validator('valor', mode='before')
    @classmethod
    def strip_valor(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if isinstance(v, str) else v


class InteressadoResponse(BaseModel):
    id: UUID
    valor: str
    criado_em: datetime

    model_config = ConfigDict(from_attributes=True)
