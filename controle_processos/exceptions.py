"""
Exceções de domínio levantadas pelos serviços.

Os handlers registrados em main.py convertem cada uma delas em uma
resposta HTTP com ErrorDetail.
"""
from typing import Any, Optional

from .schemas.erro import ErrorType


class ErroDominio(Exception):
    status_code = 400
    tipo = ErrorType.VALIDATION_ERROR

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NaoEncontradoError(ErroDominio):
    status_code = 404
    tipo = ErrorType.NOT_FOUND


class ConflitoError(ErroDominio):
    status_code = 409
    tipo = ErrorType.CONFLICT


class TransicaoInvalidaError(ErroDominio):
    status_code = 400
    tipo = ErrorType.INVALID_STATE


class ValidacaoError(ErroDominio):
    status_code = 400
    tipo = ErrorType.VALIDATION_ERROR


class NaoAutenticadoError(ErroDominio):
    status_code = 401
    tipo = ErrorType.UNAUTHORIZED


class SemPermissaoError(ErroDominio):
    status_code = 403
    tipo = ErrorType.FORBIDDEN
