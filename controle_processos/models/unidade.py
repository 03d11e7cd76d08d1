"""
Model SQLAlchemy para unidades organizacionais
"""
from sqlalchemy import Column, String, Index, text
from sqlalchemy.dialects.postgresql import UUID
import uuid

from ..database import Base
from .situacao import RegistroComSituacao, FILTRO_ATIVO


class Unidade(RegistroComSituacao, Base):
    """
    Model para unidades (remetentes e destinatárias de processos)

    Diferente dos demais cadastros, uma unidade inativa pode ser reativada.
    """
    __tablename__ = "unidades"

    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Identificador único da unidade"
    )

    nome = Column(
        String(200),
        nullable=False,
        comment="Nome da unidade"
    )

    sigla = Column(
        String(30),
        nullable=True,
        comment="Sigla da unidade"
    )

    __table_args__ = (
        Index(
            'uq_unidade_nome',
            'nome',
            unique=True,
            postgresql_where=text(FILTRO_ATIVO),
            sqlite_where=text(FILTRO_ATIVO),
        ),
        {'comment': 'Tabela de unidades organizacionais'}
    )

    def __repr__(self) -> str:
        return (
            f"<Unidade("
            f"id={self.id}, "
            f"nome={self.nome}, "
            f"situacao={self.situacao}"
            f")>"
        )
