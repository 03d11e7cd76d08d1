"""
Testes de unidades: ciclo de vida (remoção e reativação) e listagens
"""
from controle_processos.models import SituacaoRegistro

from factories import nova_unidade, novo_processo


class TestReativacao:
    async def test_reativar_unidade_ativa_e_transicao_invalida(self, client, db, adm):
        cojur = await nova_unidade(db, "COJUR")

        response = await client.patch(f"/unidades/{cojur.id}/reativar", headers=adm)

        assert response.status_code == 400
        erro = response.json()["error"]
        assert erro["type"] == "invalid_state"
        assert erro["message"] == "Unidade já está ativa."

    async def test_reativar_unidade_inativa(self, client, db, adm):
        cojur = await nova_unidade(db, "COJUR", situacao=SituacaoRegistro.INATIVO)

        response = await client.patch(f"/unidades/{cojur.id}/reativar", headers=adm)
        detalhe = await client.get(f"/unidades/{cojur.id}", headers=adm)

        assert response.status_code == 200
        assert response.json()["data"]["ativo"] is True
        assert detalhe.status_code == 200
        assert detalhe.json()["data"]["ativo"] is True

    async def test_remover_e_reativar(self, client, db, adm):
        cojur = await nova_unidade(db, "COJUR")

        remocao = await client.delete(f"/unidades/{cojur.id}", headers=adm)
        apos_remocao = await client.get(f"/unidades/{cojur.id}", headers=adm)
        reativacao = await client.patch(f"/unidades/{cojur.id}/reativar", headers=adm)

        assert remocao.status_code == 200
        assert apos_remocao.status_code == 404
        assert reativacao.status_code == 200

    async def test_reativar_com_nome_ja_em_uso(self, client, db, adm):
        antiga = await nova_unidade(db, "COJUR", situacao=SituacaoRegistro.INATIVO)
        await nova_unidade(db, "COJUR")

        response = await client.patch(f"/unidades/{antiga.id}/reativar", headers=adm)

        assert response.status_code == 409

    async def test_reativar_inexistente(self, client, adm):
        response = await client.patch(
            "/unidades/00000000-0000-0000-0000-000000000000/reativar", headers=adm
        )

        assert response.status_code == 404

    async def test_somente_adm_reativa(self, client, db, tec):
        cojur = await nova_unidade(db, "COJUR", situacao=SituacaoRegistro.INATIVO)

        response = await client.patch(f"/unidades/{cojur.id}/reativar", headers=tec)

        assert response.status_code == 403


class TestListagens:
    async def test_lista_completa_exclui_inativas_por_padrao(self, client, db, usr):
        await nova_unidade(db, "COJUR")
        await nova_unidade(db, "SEAD", situacao=SituacaoRegistro.INATIVO)

        padrao = await client.get("/unidades/lista-completa", headers=usr)
        todas = await client.get("/unidades/lista-completa", params={"includeInactive": "true"}, headers=usr)

        assert [u["nome"] for u in padrao.json()["data"]] == ["COJUR"]
        assert [u["nome"] for u in todas.json()["data"]] == ["COJUR", "SEAD"]
        assert [u["ativo"] for u in todas.json()["data"]] == [True, False]

    async def test_listagem_paginada(self, client, db, usr):
        for i in range(12):
            await nova_unidade(db, f"Unidade {i:02d}")
        await nova_unidade(db, "Inativa", situacao=SituacaoRegistro.INATIVO)

        response = await client.get("/unidades", params={"pagina": 2, "limite": 5}, headers=usr)

        data = response.json()["data"]
        assert data["total"] == 12
        assert data["total_paginas"] == 3
        assert [u["nome"] for u in data["dados"]] == [f"Unidade {i:02d}" for i in range(5, 10)]

    async def test_listagem_com_busca_por_sigla(self, client, db, usr):
        await nova_unidade(db, "Coordenadoria Jurídica", sigla="COJUR")
        await nova_unidade(db, "Secretaria de Administração", sigla="SEAD")

        response = await client.get("/unidades", params={"busca": "cojur"}, headers=usr)

        assert [u["sigla"] for u in response.json()["data"]["dados"]] == ["COJUR"]


class TestEscrita:
    async def test_criar_nome_duplicado(self, client, adm):
        await client.post("/unidades", json={"nome": "COJUR"}, headers=adm)

        response = await client.post("/unidades", json={"nome": "COJUR"}, headers=adm)

        assert response.status_code == 409

    async def test_tecnico_nao_cria(self, client, tec):
        response = await client.post("/unidades", json={"nome": "COJUR"}, headers=tec)

        assert response.status_code == 403

    async def test_remocao_bloqueada_por_processos(self, client, db, adm):
        cojur = await nova_unidade(db, "COJUR")
        await novo_processo(db, "00001.000001/2026-01", unidade_remetente="COJUR")
        await novo_processo(db, "00001.000002/2026-02", unidade_destino="COJUR")
        await novo_processo(db, "00001.000003/2026-03", unidade_destino="COJUR", situacao=SituacaoRegistro.INATIVO)

        response = await client.delete(f"/unidades/{cojur.id}", headers=adm)

        assert response.status_code == 409
        assert response.json()["error"]["details"] == {"processos_vinculados": 2}

    async def test_atualizar_sigla(self, client, db, adm):
        cojur = await nova_unidade(db, "COJUR")

        response = await client.patch(f"/unidades/{cojur.id}", json={"sigla": "CJ"}, headers=adm)

        assert response.status_code == 200
        assert response.json()["data"]["sigla"] == "CJ"
        assert response.json()["data"]["nome"] == "COJUR"

    async def test_renomear_bloqueado_por_processos(self, client, db, adm):
        cojur = await nova_unidade(db, "COJUR")
        await novo_processo(db, "00001.000001/2026-01", unidade_destino="COJUR")

        renomear = await client.patch(f"/unidades/{cojur.id}", json={"nome": "COJUR-X"}, headers=adm)
        remover = await client.delete(f"/unidades/{cojur.id}", headers=adm)

        assert renomear.status_code == 409
        assert renomear.json()["error"]["details"] == {"processos_vinculados": 1}
        assert remover.status_code == 409

    async def test_renomear_sem_processos(self, client, db, adm):
        cojur = await nova_unidade(db, "COJUR")

        response = await client.patch(f"/unidades/{cojur.id}", json={"nome": "COJUR-X"}, headers=adm)

        assert response.status_code == 200
        assert response.json()["data"]["nome"] == "COJUR-X"
