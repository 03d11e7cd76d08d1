"""
Regras de negócio e acesso ao banco
"""
