"""Password hashing, JWT helpers, and session dependencies."""

import uuid
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from gestao_os.core.config import settings
from gestao_os.core.database import get_db
from gestao_os.models import TokenRevogado, Usuario

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=not settings.auth_disabled)

ACCESS_TOKEN = "access"
RESET_TOKEN = "reset"

LOGIN_ERROR_MESSAGE = "Falha ao fazer login. Verifique suas credenciais."


def _default_admin_user() -> Usuario:
    """Return a mock user when auth is disabled."""
    return Usuario(
        id=0,
        email="dev@localhost",
        nome="Administrador (modo teste)",
        password_hash="",
        is_active=True,
    )


# Password helpers -----------------------------------------------------------

def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


# JWT helpers ----------------------------------------------------------------

def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
    purpose: str = ACCESS_TOKEN,
) -> str:
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire, "jti": uuid.uuid4().hex, "purpose": purpose})
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def create_reset_token(email: str) -> str:
    return create_access_token(
        {"sub": email},
        expires_delta=timedelta(minutes=settings.reset_token_expire_minutes),
        purpose=RESET_TOKEN,
    )


def decode_token(token: str) -> Dict[str, Any]:
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def is_revoked(jti: Optional[str], db: Session) -> bool:
    if not jti:
        return True
    return db.get(TokenRevogado, jti) is not None


def revoke_token(jti: str, db: Session) -> None:
    if db.get(TokenRevogado, jti) is None:
        db.add(TokenRevogado(jti=jti))
        db.commit()


# Dependencies ---------------------------------------------------------------

def get_token_payload(token: str | None, db: Session) -> Dict[str, Any]:
    """Decode a bearer token and reject revoked or non-session tokens."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Sessão inválida ou expirada.",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise credentials_exception
    try:
        payload = decode_token(token)
    except JWTError as exc:
        raise credentials_exception from exc

    if payload.get("purpose") != ACCESS_TOKEN or is_revoked(payload.get("jti"), db):
        raise credentials_exception
    return payload


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Usuario:
    if settings.auth_disabled:
        return _default_admin_user()

    payload = get_token_payload(token, db)
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Sessão inválida ou expirada.",
        headers={"WWW-Authenticate": "Bearer"},
    )

    email: str | None = payload.get("sub")
    if not email:
        raise credentials_exception

    user = db.query(Usuario).filter(Usuario.email == email).first()
    if not user:
        raise credentials_exception
    if not user.is_active:
        raise credentials_exception
    return user
