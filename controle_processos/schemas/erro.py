"""
Schemas de erro padronizados da API
"""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class ErrorType(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION_ERROR = "validation_error"
    INVALID_STATE = "invalid_state"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    PROCESSING_ERROR = "processing_error"


class ErrorDetail(BaseModel):
    type: ErrorType
    message: str
    details: Optional[dict[str, Any]] = None
