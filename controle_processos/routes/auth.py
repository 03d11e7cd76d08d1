import logging
import time

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel, Field

from ..auth import decrypt_token, emitir_token
from ..config import settings
from ..permissoes import Papel

logger = logging.getLogger(__name__)

router = APIRouter()


class GenerateTokenRequest(BaseModel):
    usuario_id: str = Field(..., min_length=1, max_length=100)
    usuario: str = Field(..., min_length=1, max_length=100)
    papel: Papel


class TokenResponse(BaseModel):
    token: str
    expires_at: int


class RefreshTokenRequest(BaseModel):
    token: str


@router.post("/token", response_model=TokenResponse)
async def generate_token(
    body: GenerateTokenRequest,
    x_api_key: str = Header(..., alias="x-api-key"),
):
    """
    Emite um token de acesso para o usuário informado.
    Chamado pelo sistema de login externo, autenticado pela API key.
    """
    if not settings.AUTH_API_KEY:
        raise HTTPException(status_code=500, detail="AUTH_API_KEY not configured")

    if x_api_key != settings.AUTH_API_KEY:
        raise HTTPException(status_code=403, detail="Invalid API key")

    if not settings.JWE_SECRET_KEY:
        raise HTTPException(status_code=500, detail="JWE_SECRET_KEY not configured")

    try:
        token, expires_at = emitir_token(body.usuario_id, body.usuario, body.papel)
        logger.info(f"Token emitido: usuario={body.usuario_id}, papel={body.papel.value}")
        return TokenResponse(token=token, expires_at=expires_at)
    except Exception as e:
        logger.error(f"Error generating JWE token: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate token")


@router.post("/refresh-token", response_model=TokenResponse)
async def refresh_token(body: RefreshTokenRequest):
    """
    Accepts a valid (non-expired) JWE token and returns a new one with
    refreshed iat/exp timestamps.
    """
    if not settings.JWE_SECRET_KEY:
        raise HTTPException(status_code=500, detail="JWE_SECRET_KEY not configured")

    try:
        payload = decrypt_token(body.token)
    except Exception:
        raise HTTPException(status_code=401, detail="Invalid token")

    if payload.get("exp", 0) < int(time.time()):
        raise HTTPException(status_code=401, detail="Token expired")

    try:
        token, expires_at = emitir_token(payload["sub"], payload.get("usuario", ""), payload["papel"])
        return TokenResponse(token=token, expires_at=expires_at)
    except Exception as e:
        logger.error(f"Error refreshing JWE token: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to refresh token")
