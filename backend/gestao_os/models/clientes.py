"""Models for clientes table."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from gestao_os.models import Base


class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False, index=True)
    cpf_cnpj = Column(String(20), nullable=False)
    telefone = Column(String(20), nullable=False)
    email = Column(String(255), nullable=False)
    rua = Column(String(255), nullable=False)
    numero = Column(String(20), nullable=False)
    complemento = Column(String(255))
    bairro = Column(String(120), nullable=False)
    cidade = Column(String(120), nullable=False)
    estado = Column(String(50), nullable=False)
    cep = Column(String(10), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:  # pragma: no cover - helper for debugging
        return f"<Cliente id={self.id} nome={self.nome!r}>"
