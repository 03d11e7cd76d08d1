"""
Política de autorização por papel.

Toda rota protegida declara a operação que executa e a checagem é feita
sempre pela mesma função, permitido(papel, operacao).
"""
from enum import Enum


class Papel(str, Enum):
    ADM = "ADM"
    TEC = "TEC"
    USR = "USR"


class Operacao(str, Enum):
    PROCESSO_LER = "processo:ler"
    PROCESSO_CRIAR = "processo:criar"
    PROCESSO_ATUALIZAR = "processo:atualizar"
    PROCESSO_REMOVER = "processo:remover"
    PROCESSO_RESPONDER = "processo:responder"
    ANDAMENTO_LER = "andamento:ler"
    ANDAMENTO_ESCREVER = "andamento:escrever"
    UNIDADE_LER = "unidade:ler"
    UNIDADE_ESCREVER = "unidade:escrever"
    INTERESSADO_LER = "interessado:ler"
    INTERESSADO_ESCREVER = "interessado:escrever"


TODOS = frozenset(Papel)

POLITICA: dict[Operacao, frozenset[Papel]] = {
    Operacao.PROCESSO_LER: TODOS,
    Operacao.PROCESSO_CRIAR: frozenset({Papel.ADM, Papel.TEC}),
    Operacao.PROCESSO_ATUALIZAR: frozenset({Papel.ADM, Papel.TEC}),
    Operacao.PROCESSO_REMOVER: frozenset({Papel.ADM}),
    Operacao.PROCESSO_RESPONDER: TODOS,
    Operacao.ANDAMENTO_LER: TODOS,
    Operacao.ANDAMENTO_ESCREVER: frozenset({Papel.ADM, Papel.TEC}),
    Operacao.UNIDADE_LER: TODOS,
    Operacao.UNIDADE_ESCREVER: frozenset({Papel.ADM}),
    Operacao.INTERESSADO_LER: TODOS,
    Operacao.INTERESSADO_ESCREVER: frozenset({Papel.ADM, Papel.TEC}),
}


def permitido(papel: Papel | str, operacao: Operacao) -> bool:
    try:
        papel = Papel(papel)
    except ValueError:
        return False
    return papel in POLITICA.get(operacao, frozenset())
