"""Models for usuarios and tokens_revogados tables."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import expression, func

from gestao_os.models import Base


class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True)
    nome = Column(String(255), nullable=False)
    password_hash = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default=expression.true())
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:  # pragma: no cover - helper for debugging
        return f"<Usuario id={self.id} email={self.email!r}>"


class TokenRevogado(Base):
    __tablename__ = "tokens_revogados"

    jti = Column(String(64), primary_key=True)
    revoked_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
