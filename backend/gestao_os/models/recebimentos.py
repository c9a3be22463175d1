"""Model for recebimentos_parciais table."""

from sqlalchemy import Column, Date, DateTime, Integer, Numeric, Text
from sqlalchemy.sql import func

from gestao_os.models import Base


class RecebimentoParcial(Base):
    __tablename__ = "recebimentos_parciais"

    id = Column(Integer, primary_key=True, index=True)
    # Soft reference: deleting the order leaves the receipt behind.
    ordem_id = Column(Integer, nullable=False, index=True)
    valor = Column(Numeric(12, 2), nullable=False)
    data = Column(Date, nullable=False)
    observacao = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:  # pragma: no cover - helper for debugging
        return f"<RecebimentoParcial id={self.id} ordem_id={self.ordem_id} valor={self.valor}>"
