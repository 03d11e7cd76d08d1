"""
Model SQLAlchemy para processos administrativos
"""
from sqlalchemy import Column, String, Text, Date, TIMESTAMP, Index, ForeignKey, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from ..database import Base
from .situacao import RegistroComSituacao, FILTRO_ATIVO


class Processo(RegistroComSituacao, Base):
    """
    Model para processos tramitados entre unidades

    Implementa soft delete através do campo situacao
    """
    __tablename__ = "processos"

    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Identificador único do processo"
    )

    numero_sei = Column(
        String(50),
        nullable=False,
        comment="Número SEI do processo"
    )

    assunto = Column(
        Text,
        nullable=True,
        comment="Assunto do processo"
    )

    origem = Column(
        String(200),
        nullable=True,
        comment="Origem do processo"
    )

    observacoes = Column(
        Text,
        nullable=True,
        comment="Observações livres"
    )

    interessado_id = Column(
        UUID(as_uuid=True),
        ForeignKey("interessados.id"),
        nullable=True,
        comment="ID do interessado"
    )

    unidade_remetente = Column(
        String(200),
        nullable=True,
        comment="Nome da unidade remetente"
    )

    unidade_destino = Column(
        String(200),
        nullable=True,
        comment="Nome da unidade de destino"
    )

    prazo = Column(
        Date,
        nullable=True,
        comment="Data limite para resposta"
    )

    prorrogacao = Column(
        Date,
        nullable=True,
        comment="Data limite prorrogada"
    )

    resposta_final = Column(
        Text,
        nullable=True,
        comment="Texto da resposta final"
    )

    unidade_resposta_final = Column(
        String(200),
        nullable=True,
        comment="Unidade que respondeu o processo"
    )

    data_resposta_final = Column(
        TIMESTAMP(timezone=True),
        nullable=True,
        comment="Data e hora do registro da resposta final"
    )

    respondido_por = Column(
        String(100),
        nullable=True,
        comment="Usuário que registrou a resposta final"
    )

    criado_por = Column(
        String(100),
        nullable=True,
        comment="Usuário que cadastrou o processo"
    )

    interessado = relationship("Interessado", back_populates="processos", lazy="selectin")
    andamentos = relationship(
        "Andamento",
        back_populates="processo",
        lazy="selectin",
        order_by="[Andamento.criado_em, Andamento.id]",
    )

    __table_args__ = (
        Index(
            'uq_processo_numero_sei',
            'numero_sei',
            unique=True,
            postgresql_where=text(FILTRO_ATIVO),
            sqlite_where=text(FILTRO_ATIVO),
        ),
        Index(
            'idx_processo_interessado',
            'interessado_id',
            postgresql_where=text(FILTRO_ATIVO),
        ),
        Index(
            'idx_processo_prazos',
            'prazo',
            'prorrogacao',
            postgresql_where=text(FILTRO_ATIVO),
        ),
        Index(
            'idx_processo_criado_em',
            'criado_em',
            postgresql_using='btree',
            postgresql_ops={'criado_em': 'DESC'},
            postgresql_where=text(FILTRO_ATIVO),
        ),
        {'comment': 'Tabela de processos administrativos'}
    )

    def __repr__(self) -> str:
        return (
            f"<Processo("
            f"id={self.id}, "
            f"numero_sei={self.numero_sei}, "
            f"situacao={self.situacao}"
            f")>"
        )

    @property
    def concluido(self) -> bool:
        """Concluído quando ao menos um andamento foi concluído"""
        return any(a.concluido for a in self.andamentos)

    @property
    def interessado_nome(self) -> str | None:
        return self.interessado.valor if self.interessado else None
