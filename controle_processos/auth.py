"""
Tokens JWE de acesso e dependency do usuário autenticado
"""
import base64
import json
import logging
import time
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwcrypto import jwe, jwk
from pydantic import BaseModel

from .config import settings
from .exceptions import NaoAutenticadoError, SemPermissaoError
from .permissoes import Operacao, Papel, permitido

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class UsuarioAtual(BaseModel):
    id: str
    usuario: str
    papel: Papel


def _get_jwk_key() -> jwk.JWK:
    """Decode JWE_SECRET_KEY and return a JWK symmetric key."""
    key_bytes = base64.urlsafe_b64decode(settings.JWE_SECRET_KEY)
    if len(key_bytes) != 32:
        raise ValueError(f"JWE_SECRET_KEY must be 32 bytes, got {len(key_bytes)}")
    return jwk.JWK(kty="oct", k=base64.urlsafe_b64encode(key_bytes).decode().rstrip("="))


def encrypt_payload(payload: dict) -> str:
    """Encrypt a dict payload into a compact JWE token."""
    key = _get_jwk_key()
    jwe_token = jwe.JWE(
        json.dumps(payload).encode("utf-8"),
        protected=json.dumps({"alg": "dir", "enc": "A256GCM"}),
        recipient=key,
    )
    return jwe_token.serialize(compact=True)


def decrypt_token(token: str) -> dict:
    """Decrypt a compact JWE token and return the payload dict."""
    key = _get_jwk_key()
    jwe_token = jwe.JWE()
    jwe_token.deserialize(token, key)
    return json.loads(jwe_token.payload.decode("utf-8"))


def emitir_token(usuario_id: str, usuario: str, papel: Papel) -> tuple[str, int]:
    """Gera um token para o usuário e devolve (token, expires_at)"""
    now = int(time.time())
    exp = now + settings.JWE_TOKEN_TTL
    payload = {
        "sub": usuario_id,
        "usuario": usuario,
        "papel": Papel(papel).value,
        "iat": now,
        "exp": exp,
    }
    return encrypt_payload(payload), exp


async def get_usuario_atual(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UsuarioAtual:
    """
    Dependency que retorna o usuário do token Bearer.
    Levanta NaoAutenticadoError (401) se ausente, inválido ou expirado.
    """
    if credentials is None or not credentials.credentials:
        raise NaoAutenticadoError("Token de acesso não fornecido")

    try:
        payload = decrypt_token(credentials.credentials)
    except Exception:
        logger.warning("Token de acesso inválido recebido")
        raise NaoAutenticadoError("Token inválido")

    if payload.get("exp", 0) < int(time.time()):
        raise NaoAutenticadoError("Token expirado")

    try:
        return UsuarioAtual(
            id=str(payload["sub"]),
            usuario=payload.get("usuario", ""),
            papel=payload["papel"],
        )
    except (KeyError, ValueError):
        raise NaoAutenticadoError("Token inválido")


def exigir_permissao(operacao: Operacao):
    """
    Dependency factory que aplica a política de autorização na rota.

    Usage:
        @router.post("", dependencies=[Depends(exigir_permissao(Operacao.PROCESSO_CRIAR))])
    """
    async def dependencia(usuario: UsuarioAtual = Depends(get_usuario_atual)) -> UsuarioAtual:
        if not permitido(usuario.papel, operacao):
            logger.info(f"Acesso negado: usuario={usuario.id}, papel={usuario.papel.value}, operacao={operacao.value}")
            raise SemPermissaoError("Você não tem permissão para executar esta operação")
        return usuario

    return dependencia
