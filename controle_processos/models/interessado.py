"""
Model SQLAlchemy para interessados
"""
from sqlalchemy import Column, String, Index, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from ..database import Base
from .situacao import RegistroComSituacao, FILTRO_ATIVO


class Interessado(RegistroComSituacao, Base):
    """
    Model para interessados vinculados a processos

    O nome (valor) é único apenas entre os registros ativos, então
    um nome inativado pode ser cadastrado novamente.
    """
    __tablename__ = "interessados"

    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Identificador único do interessado"
    )

    valor = Column(
        String(300),
        nullable=False,
        comment="Nome de exibição do interessado"
    )

    processos = relationship("Processo", back_populates="interessado", lazy="noload")

    __table_args__ = (
        Index(
            'uq_interessado_valor',
            'valor',
            unique=True,
            postgresql_where=text(FILTRO_ATIVO),
            sqlite_where=text(FILTRO_ATIVO),
        ),
        {'comment': 'Tabela de interessados'}
    )

    def __repr__(self) -> str:
        return f"<Interessado(id={self.id}, valor={self.valor})>"
