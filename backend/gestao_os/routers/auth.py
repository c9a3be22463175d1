"""Authentication routes."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Response, status
from jose import JWTError
from sqlalchemy.orm import Session

from gestao_os.core.config import settings
from gestao_os.core.database import get_db
from gestao_os.core.security import (
    LOGIN_ERROR_MESSAGE,
    RESET_TOKEN,
    create_access_token,
    create_reset_token,
    decode_token,
    get_current_user,
    get_token_payload,
    hash_password,
    is_revoked,
    oauth2_scheme,
    revoke_token,
    verify_password,
)
from gestao_os.models import Usuario
from gestao_os.schemas import (
    MessageOut,
    PasswordResetConfirm,
    PasswordResetRequest,
    TokenResponse,
    UsuarioAuthOut,
    UsuarioLogin,
)

logger = logging.getLogger("gestao_os.auth")

router = APIRouter(prefix="/auth", tags=["Autenticação"])

RESET_ERROR_MESSAGE = "Token de redefinição inválido ou expirado."


def _find_user(email: str, db: Session) -> Usuario | None:
    return db.query(Usuario).filter(Usuario.email == email.strip().lower()).first()


@router.post("/login", response_model=TokenResponse)
def login(payload: UsuarioLogin, db: Session = Depends(get_db)) -> TokenResponse:
    user = _find_user(payload.email, db)
    if not user or not user.is_active or not verify_password(payload.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=LOGIN_ERROR_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token({"sub": user.email})
    return TokenResponse(
        access_token=token,
        user=UsuarioAuthOut(id=user.id, email=user.email, nome=user.nome),
    )


@router.get("/me", response_model=UsuarioAuthOut)
def me(user: Usuario = Depends(get_current_user)) -> UsuarioAuthOut:
    return UsuarioAuthOut(id=user.id, email=user.email, nome=user.nome)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    user: Usuario = Depends(get_current_user),
    db: Session = Depends(get_db),
    token: str | None = Depends(oauth2_scheme),
) -> Response:
    if not settings.auth_disabled:
        payload: Dict[str, Any] = get_token_payload(token, db)
        revoke_token(payload["jti"], db)
        logger.info("Sessão encerrada para %s", user.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/password-reset",
    response_model=MessageOut,
    status_code=status.HTTP_202_ACCEPTED,
)
def request_password_reset(payload: PasswordResetRequest, db: Session = Depends(get_db)) -> MessageOut:
    user = _find_user(payload.email, db)
    if user and user.is_active:
        token = create_reset_token(user.email)
        logger.info("Redefinição de senha solicitada para %s", user.email)
        if settings.app_env == "dev":
            logger.info("Link de redefinição: /redefinir-senha?token=%s", token)
    return MessageOut(detail="Se o e-mail estiver cadastrado, enviaremos as instruções de redefinição.")


@router.post("/password-reset/confirm", status_code=status.HTTP_204_NO_CONTENT)
def confirm_password_reset(payload: PasswordResetConfirm, db: Session = Depends(get_db)) -> Response:
    try:
        claims = decode_token(payload.token)
    except JWTError as exc:
        raise HTTPException(status_code=400, detail=RESET_ERROR_MESSAGE) from exc

    if claims.get("purpose") != RESET_TOKEN or is_revoked(claims.get("jti"), db):
        raise HTTPException(status_code=400, detail=RESET_ERROR_MESSAGE)

    user = _find_user(claims.get("sub") or "", db)
    if not user or not user.is_active:
        raise HTTPException(status_code=400, detail=RESET_ERROR_MESSAGE)

    user.password_hash = hash_password(payload.newPassword)
    db.add(user)
    db.commit()
    revoke_token(claims["jti"], db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
