"""
Model SQLAlchemy para andamentos (tramitações) de processos
"""
from sqlalchemy import Column, String, Text, Date, Boolean, TIMESTAMP, Index, ForeignKey, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from ..database import Base


class Andamento(Base):
    """
    Model para andamentos de um processo

    Um processo é considerado concluído quando possui ao menos
    um andamento com concluido = true.
    """
    __tablename__ = "andamentos"

    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Identificador único do andamento"
    )

    processo_id = Column(
        UUID(as_uuid=True),
        ForeignKey("processos.id", ondelete="CASCADE"),
        nullable=False,
        comment="ID do processo"
    )

    origem = Column(
        String(200),
        nullable=True,
        comment="Unidade de origem do andamento"
    )

    destino = Column(
        String(200),
        nullable=True,
        comment="Unidade de destino do andamento"
    )

    descricao = Column(
        Text,
        nullable=True,
        comment="Descrição do andamento"
    )

    observacoes = Column(
        Text,
        nullable=True,
        comment="Observações do andamento"
    )

    prazo = Column(
        Date,
        nullable=True,
        comment="Prazo do andamento"
    )

    concluido = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
        comment="Indica se o andamento foi concluído"
    )

    criado_por = Column(
        String(100),
        nullable=True,
        comment="Usuário que registrou o andamento"
    )

    criado_em = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Data e hora de criação"
    )

    atualizado_em = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Data e hora da última atualização"
    )

    processo = relationship("Processo", back_populates="andamentos")

    __table_args__ = (
        Index('idx_andamento_processo', 'processo_id'),
        Index(
            'idx_andamento_concluido',
            'processo_id',
            postgresql_where=text("concluido"),
        ),
        {'comment': 'Tabela de andamentos de processos'}
    )

    def __repr__(self) -> str:
        return (
            f"<Andamento("
            f"id={self.id}, "
            f"processo_id={self.processo_id}, "
            f"concluido={self.concluido}"
            f")>"
        )
