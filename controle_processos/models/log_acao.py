"""
Model SQLAlchemy para o registro de ações dos usuários
"""
from sqlalchemy import Column, String, TIMESTAMP, JSON, Index, text
from sqlalchemy.dialects.postgresql import UUID
import uuid

from ..database import Base


class LogAcao(Base):
    __tablename__ = "log_acoes"

    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Identificador único do registro"
    )

    acao = Column(
        String(50),
        nullable=False,
        comment="Ação executada (CRIAR, ATUALIZAR, REMOVER...)"
    )

    entidade = Column(
        String(50),
        nullable=False,
        comment="Tipo da entidade afetada"
    )

    entidade_id = Column(
        String(50),
        nullable=True,
        comment="ID da entidade afetada"
    )

    usuario_id = Column(
        String(100),
        nullable=True,
        comment="Usuário que executou a ação"
    )

    detalhes = Column(
        JSON,
        nullable=True,
        comment="Dados adicionais da ação"
    )

    criado_em = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Data e hora da ação"
    )

    __table_args__ = (
        Index('idx_log_entidade', 'entidade', 'entidade_id'),
        Index('idx_log_usuario', 'usuario_id'),
        {'comment': 'Registro de ações dos usuários'}
    )

    def __repr__(self) -> str:
        return (
            f"<LogAcao("
            f"acao={self.acao}, "
            f"entidade={self.entidade}, "
            f"entidade_id={self.entidade_id}"
            f")>"
        )
