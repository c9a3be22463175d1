"""Models for ordens and servicos tables."""

from sqlalchemy import JSON, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from gestao_os.models import Base

PAGAMENTO_PENDENTE = "PENDENTE"
PAGAMENTO_PAGO = "PAGO"

PRODUCAO_AGUARDANDO = "AGUARDANDO"
PRODUCAO_EM_PRODUCAO = "EM_PRODUCAO"
PRODUCAO_CONCLUIDO = "CONCLUIDO"


class OrdemServico(Base):
    __tablename__ = "ordens"

    id = Column(Integer, primary_key=True, index=True)
    numero = Column(String(10), nullable=False, index=True)
    referencia = Column(String(255), nullable=False)
    # Snapshot of the client as it was when the order was saved.
    cliente = Column(JSON, nullable=False)
    data_emissao = Column(DateTime, nullable=False, index=True)
    data_entrega = Column(Date, nullable=False)
    valor_total = Column(Numeric(12, 2), nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    servicos = relationship(
        "Servico",
        back_populates="ordem",
        cascade="all, delete-orphan",
        order_by="Servico.posicao",
    )

    def __repr__(self) -> str:  # pragma: no cover - helper for debugging
        return f"<OrdemServico id={self.id} numero={self.numero!r}>"


class Servico(Base):
    __tablename__ = "servicos"

    id = Column(Integer, primary_key=True, index=True)
    ordem_id = Column(Integer, ForeignKey("ordens.id", ondelete="CASCADE"), nullable=False)
    posicao = Column(Integer, nullable=False, default=0)
    descricao = Column(Text, nullable=False)
    quantidade = Column(Integer, nullable=False)
    valor_unitario = Column(Numeric(12, 2), nullable=False)
    valor_total = Column(Numeric(12, 2), nullable=False)
    status_pagamento = Column(String(20), nullable=False, default=PAGAMENTO_PENDENTE)
    status_producao = Column(String(20), nullable=False, default=PRODUCAO_AGUARDANDO)

    ordem = relationship("OrdemServico", back_populates="servicos")

    def __repr__(self) -> str:  # pragma: no cover - helper for debugging
        return f"<Servico id={self.id} descricao={self.descricao!r} valor_total={self.valor_total}>"
