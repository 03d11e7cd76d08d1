"""create processos, andamentos, interessados, unidades and log_acoes tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

FILTRO_ATIVO = "situacao = 'ativo'"


def _colunas_situacao():
    return [
        sa.Column('situacao', sa.String(20), server_default=sa.text("'ativo'"), nullable=False),
        sa.Column('criado_em', sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column('atualizado_em', sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column('deletado_em', sa.TIMESTAMP(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    # --- interessados ---
    op.create_table(
        'interessados',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column('valor', sa.String(300), nullable=False),
        *_colunas_situacao(),
        sa.PrimaryKeyConstraint('id'),
        comment='Tabela de interessados'
    )
    op.create_index(
        'uq_interessado_valor', 'interessados', ['valor'], unique=True,
        postgresql_where=sa.text(FILTRO_ATIVO)
    )

    # --- unidades ---
    op.create_table(
        'unidades',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column('nome', sa.String(200), nullable=False),
        sa.Column('sigla', sa.String(30), nullable=True),
        *_colunas_situacao(),
        sa.PrimaryKeyConstraint('id'),
        comment='Tabela de unidades organizacionais'
    )
    op.create_index(
        'uq_unidade_nome', 'unidades', ['nome'], unique=True,
        postgresql_where=sa.text(FILTRO_ATIVO)
    )

    # --- processos ---
    op.create_table(
        'processos',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column('numero_sei', sa.String(50), nullable=False),
        sa.Column('assunto', sa.Text(), nullable=True),
        sa.Column('origem', sa.String(200), nullable=True),
        sa.Column('observacoes', sa.Text(), nullable=True),
        sa.Column('interessado_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('unidade_remetente', sa.String(200), nullable=True),
        sa.Column('unidade_destino', sa.String(200), nullable=True),
        sa.Column('prazo', sa.Date(), nullable=True),
        sa.Column('prorrogacao', sa.Date(), nullable=True),
        sa.Column('resposta_final', sa.Text(), nullable=True),
        sa.Column('unidade_resposta_final', sa.String(200), nullable=True),
        sa.Column('data_resposta_final', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column('respondido_por', sa.String(100), nullable=True),
        sa.Column('criado_por', sa.String(100), nullable=True),
        *_colunas_situacao(),
        sa.ForeignKeyConstraint(['interessado_id'], ['interessados.id']),
        sa.PrimaryKeyConstraint('id'),
        comment='Tabela de processos administrativos'
    )
    op.create_index(
        'uq_processo_numero_sei', 'processos', ['numero_sei'], unique=True,
        postgresql_where=sa.text(FILTRO_ATIVO)
    )
    op.create_index(
        'idx_processo_interessado', 'processos', ['interessado_id'],
        postgresql_where=sa.text(FILTRO_ATIVO)
    )
    op.create_index(
        'idx_processo_prazos', 'processos', ['prazo', 'prorrogacao'],
        postgresql_where=sa.text(FILTRO_ATIVO)
    )
    op.create_index(
        'idx_processo_criado_em', 'processos', ['criado_em'],
        postgresql_using='btree',
        postgresql_ops={'criado_em': 'DESC'},
        postgresql_where=sa.text(FILTRO_ATIVO)
    )

    # --- andamentos ---
    op.create_table(
        'andamentos',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column('processo_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('origem', sa.String(200), nullable=True),
        sa.Column('destino', sa.String(200), nullable=True),
        sa.Column('descricao', sa.Text(), nullable=True),
        sa.Column('observacoes', sa.Text(), nullable=True),
        sa.Column('prazo', sa.Date(), nullable=True),
        sa.Column('concluido', sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column('criado_por', sa.String(100), nullable=True),
        sa.Column('criado_em', sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column('atualizado_em', sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.ForeignKeyConstraint(['processo_id'], ['processos.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        comment='Tabela de andamentos de processos'
    )
    op.create_index('idx_andamento_processo', 'andamentos', ['processo_id'])
    op.create_index(
        'idx_andamento_concluido', 'andamentos', ['processo_id'],
        postgresql_where=sa.text("concluido")
    )

    # --- log_acoes ---
    op.create_table(
        'log_acoes',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column('acao', sa.String(50), nullable=False),
        sa.Column('entidade', sa.String(50), nullable=False),
        sa.Column('entidade_id', sa.String(50), nullable=True),
        sa.Column('usuario_id', sa.String(100), nullable=True),
        sa.Column('detalhes', sa.JSON(), nullable=True),
        sa.Column('criado_em', sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        comment='Registro de ações dos usuários'
    )
    op.create_index('idx_log_entidade', 'log_acoes', ['entidade', 'entidade_id'])
    op.create_index('idx_log_usuario', 'log_acoes', ['usuario_id'])


def downgrade() -> None:
    op.drop_index('idx_log_usuario', table_name='log_acoes')
    op.drop_index('idx_log_entidade', table_name='log_acoes')
    op.drop_table('log_acoes')
    op.drop_index('idx_andamento_concluido', table_name='andamentos')
    op.drop_index('idx_andamento_processo', table_name='andamentos')
    op.drop_table('andamentos')
    op.drop_index('idx_processo_criado_em', table_name='processos')
    op.drop_index('idx_processo_prazos', table_name='processos')
    op.drop_index('idx_processo_interessado', table_name='processos')
    op.drop_index('uq_processo_numero_sei', table_name='processos')
    op.drop_table('processos')
    op.drop_index('uq_unidade_nome', table_name='unidades')
    op.drop_table('unidades')
    op.drop_index('uq_interessado_valor', table_name='interessados')
    op.drop_table('interessados')
