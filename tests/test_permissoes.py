"""
Testes da política de autorização por papel
"""
import pytest

from controle_processos.permissoes import POLITICA, Operacao, Papel, permitido

LEITURAS = [
    Operacao.PROCESSO_LER,
    Operacao.ANDAMENTO_LER,
    Operacao.UNIDADE_LER,
    Operacao.INTERESSADO_LER,
]


def test_toda_operacao_tem_regra():
    assert set(POLITICA) == set(Operacao)


@pytest.mark.parametrize("papel", list(Papel))
@pytest.mark.parametrize("operacao", LEITURAS)
def test_leitura_liberada_para_todos(papel, operacao):
    assert permitido(papel, operacao)


@pytest.mark.parametrize("papel", list(Papel))
def test_resposta_final_liberada_para_todos(papel):
    assert permitido(papel, Operacao.PROCESSO_RESPONDER)


@pytest.mark.parametrize(
    "operacao",
    [
        Operacao.PROCESSO_CRIAR,
        Operacao.PROCESSO_ATUALIZAR,
        Operacao.ANDAMENTO_ESCREVER,
        Operacao.INTERESSADO_ESCREVER,
    ],
)
def test_escrita_de_cadastro(operacao):
    assert permitido(Papel.ADM, operacao)
    assert permitido(Papel.TEC, operacao)
    assert not permitido(Papel.USR, operacao)


@pytest.mark.parametrize("operacao", [Operacao.PROCESSO_REMOVER, Operacao.UNIDADE_ESCREVER])
def test_somente_administrador(operacao):
    assert permitido(Papel.ADM, operacao)
    assert not permitido(Papel.TEC, operacao)
    assert not permitido(Papel.USR, operacao)


def test_papel_como_texto():
    assert permitido("TEC", Operacao.PROCESSO_CRIAR)
    assert not permitido("USR", Operacao.PROCESSO_CRIAR)


def test_papel_desconhecido_nada_pode():
    assert not permitido("ROOT", Operacao.PROCESSO_LER)
