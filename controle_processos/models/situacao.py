"""
Ciclo de vida (soft delete) compartilhado pelos cadastros
"""
import enum
from datetime import datetime

from sqlalchemy import Column, Enum, TIMESTAMP, text


class SituacaoRegistro(str, enum.Enum):
    ATIVO = "ativo"
    INATIVO = "inativo"


# Predicado usado nos índices parciais
FILTRO_ATIVO = "situacao = 'ativo'"


class RegistroComSituacao:
    """
    Mixin de soft delete: o registro nunca é apagado fisicamente,
    apenas passa de ATIVO para INATIVO (e, quando permitido, volta).
    """

    situacao = Column(
        Enum(
            SituacaoRegistro,
            name="situacao_registro",
            native_enum=False,
            length=20,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=SituacaoRegistro.ATIVO,
        server_default=text("'ativo'"),
        comment="Situação do registro (ativo, inativo)"
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

    deletado_em = Column(
        TIMESTAMP(timezone=True),
        nullable=True,
        comment="Data e hora da inativação (soft delete)"
    )

    def soft_delete(self) -> None:
        self.situacao = SituacaoRegistro.INATIVO
        self.deletado_em = datetime.utcnow()

    def restore(self) -> None:
        self.situacao = SituacaoRegistro.ATIVO
        self.deletado_em = None

    def tocar(self) -> None:
        self.atualizado_em = datetime.utcnow()

    @property
    def ativo(self) -> bool:
        return self.situacao == SituacaoRegistro.ATIVO
