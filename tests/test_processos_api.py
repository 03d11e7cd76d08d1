"""
Testes das rotas de processos e andamentos
"""
from datetime import datetime, timedelta

from sqlalchemy import select

from controle_processos.models import Andamento, SituacaoRegistro
from controle_processos.services.comum import hoje

from factories import HOJE, novo_andamento, novo_interessado, novo_processo

NUMERO = "00002.012041/2025-95"


class TestCadastro:
    async def test_criar_e_consultar(self, client, db, tec):
        joao = await novo_interessado(db, "João Silva")

        criado = await client.post(
            "/processos",
            json={
                "numero_sei": f"  {NUMERO} ",
                "assunto": "Licença",
                "interessado_id": str(joao.id),
                "unidade_remetente": "COJUR",
                "prazo": HOJE.isoformat(),
            },
            headers=tec,
        )

        assert criado.status_code == 201
        data = criado.json()["data"]
        assert data["numero_sei"] == NUMERO
        assert data["interessado"] == "João Silva"
        assert data["criado_por"] == "user-tec"
        assert data["andamentos"] == []

        detalhe = await client.get(f"/processos/{data['id']}", headers=tec)
        assert detalhe.status_code == 200
        assert detalhe.json()["data"]["assunto"] == "Licença"

    async def test_numero_sei_duplicado(self, client, db, tec):
        await novo_processo(db, NUMERO)

        response = await client.post("/processos", json={"numero_sei": NUMERO}, headers=tec)

        assert response.status_code == 409
        assert response.json()["error"]["type"] == "conflict"

    async def test_numero_sei_liberado_apos_remocao(self, client, db, tec):
        await novo_processo(db, NUMERO, situacao=SituacaoRegistro.INATIVO)

        response = await client.post("/processos", json={"numero_sei": NUMERO}, headers=tec)

        assert response.status_code == 201

    async def test_interessado_inexistente(self, client, tec):
        response = await client.post(
            "/processos",
            json={"numero_sei": NUMERO, "interessado_id": "00000000-0000-0000-0000-000000000000"},
            headers=tec,
        )

        assert response.status_code == 404

    async def test_buscar_por_numero_sei_com_barra(self, client, db, usr):
        await novo_processo(db, NUMERO)

        response = await client.get(f"/processos/numero-sei/{NUMERO}", headers=usr)

        assert response.status_code == 200
        assert response.json()["data"]["numero_sei"] == NUMERO

    async def test_atualizar_campos_parciais(self, client, db, tec):
        processo = await novo_processo(db, NUMERO, assunto="Antigo", origem="GAB")

        response = await client.patch(f"/processos/{processo.id}", json={"assunto": "Novo"}, headers=tec)

        assert response.status_code == 200
        assert response.json()["data"]["assunto"] == "Novo"
        assert response.json()["data"]["origem"] == "GAB"

    async def test_remover_e_consultar(self, client, db, adm):
        processo = await novo_processo(db, NUMERO)

        remocao = await client.delete(f"/processos/{processo.id}", headers=adm)
        detalhe = await client.get(f"/processos/{processo.id}", headers=adm)
        por_numero = await client.get(f"/processos/numero-sei/{NUMERO}", headers=adm)
        listagem = await client.get("/processos", headers=adm)

        assert remocao.status_code == 200
        assert remocao.json()["data"] == {"removido": True}
        assert detalhe.status_code == 404
        assert por_numero.status_code == 404
        assert listagem.json()["data"]["total"] == 0

    async def test_tecnico_nao_remove(self, client, db, tec):
        processo = await novo_processo(db, NUMERO)

        response = await client.delete(f"/processos/{processo.id}", headers=tec)

        assert response.status_code == 403


class TestListagem:
    async def test_parametros_em_camel_case(self, client, db, usr):
        await novo_processo(db, "A-1", unidade_remetente="COJUR", unidade_destino="SEAD")
        await novo_processo(db, "A-2", unidade_remetente="GAB", unidade_destino="SEAD")

        response = await client.get(
            "/processos",
            params={"unidadeRemetente": "cojur", "unidadeDestino": "sead"},
            headers=usr,
        )

        assert response.status_code == 200
        assert [p["numero_sei"] for p in response.json()["data"]["dados"]] == ["A-1"]

    async def test_pagina_nao_numerica_e_rejeitada(self, client, usr):
        response = await client.get("/processos", params={"pagina": "abc"}, headers=usr)

        assert response.status_code == 422

    async def test_pagina_enorme_retorna_pagina_vazia(self, client, db, usr):
        await novo_processo(db, "A-1")

        response = await client.get("/processos", params={"pagina": str(10 ** 19)}, headers=usr)

        assert response.status_code == 200
        assert response.json()["data"]["dados"] == []
        assert response.json()["data"]["total"] == 1

    async def test_limite_acima_do_maximo_e_ajustado(self, client, db, usr):
        await novo_processo(db, "A-1")

        response = await client.get("/processos", params={"limite": 500}, headers=usr)

        assert response.json()["data"]["limite"] == 100

    async def test_autocomplete_de_origens(self, client, db, usr):
        await novo_processo(db, "A-1", origem="Gabinete")
        await novo_processo(db, "A-2", origem="Gabinete")
        await novo_processo(db, "A-3", origem="Procuradoria")

        response = await client.get("/processos/origens/autocomplete", params={"q": "gab"}, headers=usr)

        assert response.json()["data"] == ["Gabinete"]

    async def test_contagens_sem_filtro_de_data_explicito(self, client, db, usr):
        response_vencendo = await client.get("/processos/contar/vencendo-hoje", headers=usr)
        response_atrasados = await client.get("/processos/contar/atrasados", headers=usr)

        assert response_vencendo.json()["data"] == {"total": 0}
        assert response_atrasados.json()["data"] == {"total": 0}


class TestAndamentos:
    async def test_criar_listar_e_concluir(self, client, db, tec):
        processo = await novo_processo(db, NUMERO)

        criado = await client.post(
            f"/processos/{processo.id}/andamentos",
            json={"origem": "COJUR", "destino": "SEAD", "descricao": "Encaminhado"},
            headers=tec,
        )
        andamento_id = criado.json()["data"]["id"]
        concluido = await client.patch(
            f"/processos/{processo.id}/andamentos/{andamento_id}/concluir", headers=tec
        )
        lista = await client.get(f"/processos/{processo.id}/andamentos", headers=tec)
        detalhe = await client.get(f"/processos/{processo.id}", headers=tec)

        assert criado.status_code == 201
        assert concluido.json()["data"]["concluido"] is True
        assert [a["id"] for a in lista.json()["data"]] == [andamento_id]
        assert detalhe.json()["data"]["concluido"] is True

    async def test_concluir_atualiza_data_de_alteracao(self, client, db, tec):
        processo = await novo_processo(db, NUMERO)
        antes = datetime(2026, 1, 1, 8, 0, 0)
        andamento = await novo_andamento(db, processo, criado_em=antes, atualizado_em=antes)

        await client.patch(f"/processos/{processo.id}/andamentos/{andamento.id}/concluir", headers=tec)

        recarregado = (await db.execute(
            select(Andamento).where(Andamento.id == andamento.id).execution_options(populate_existing=True)
        )).scalar_one()
        assert recarregado.concluido is True
        assert recarregado.atualizado_em.replace(tzinfo=None) > antes

    async def test_concluir_duas_vezes(self, client, db, tec):
        processo = await novo_processo(db, NUMERO)
        andamento = await novo_andamento(db, processo, concluido=True)

        response = await client.patch(
            f"/processos/{processo.id}/andamentos/{andamento.id}/concluir", headers=tec
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "invalid_state"

    async def test_andamento_em_processo_removido(self, client, db, tec):
        processo = await novo_processo(db, NUMERO, situacao=SituacaoRegistro.INATIVO)

        response = await client.post(f"/processos/{processo.id}/andamentos", json={}, headers=tec)

        assert response.status_code == 404

    async def test_usuario_comum_nao_registra_andamento(self, client, db, usr):
        processo = await novo_processo(db, NUMERO)

        response = await client.post(f"/processos/{processo.id}/andamentos", json={}, headers=usr)

        assert response.status_code == 403


class TestRespostaFinal:
    async def _processo_tramitado(self, db):
        processo = await novo_processo(db, NUMERO, prazo=hoje() - timedelta(days=3))
        base = datetime(2026, 1, 1, 8, 0, 0)
        tramites = [("GAB", "COJUR"), ("COJUR", "SEAD"), ("SEAD", "COJUR")]
        for i, (origem, destino) in enumerate(tramites):
            await novo_andamento(
                db, processo, origem=origem, destino=destino, criado_em=base + timedelta(hours=i)
            )
        return processo

    async def test_unidades_disponiveis(self, client, db, usr):
        processo = await self._processo_tramitado(db)

        response = await client.get(f"/processos/{processo.id}/unidades-resposta", headers=usr)

        assert response.json()["data"] == {"unidades": ["COJUR", "SEAD"]}

    async def test_andamentos_no_mesmo_instante_tem_ordem_estavel(self, client, db, usr):
        processo = await novo_processo(db, NUMERO)
        instante = datetime(2026, 1, 1, 8, 0, 0)
        criados = [
            await novo_andamento(db, processo, destino=destino, criado_em=instante)
            for destino in ("COJUR", "SEAD", "GAB")
        ]
        esperado = [a.destino for a in sorted(criados, key=lambda a: a.id)]

        primeira = await client.get(f"/processos/{processo.id}/unidades-resposta", headers=usr)
        segunda = await client.get(f"/processos/{processo.id}/unidades-resposta", headers=usr)

        assert primeira.json()["data"]["unidades"] == esperado
        assert segunda.json()["data"]["unidades"] == esperado

    async def test_registrar_resposta_conclui_andamentos_da_unidade(self, client, db, usr):
        processo = await self._processo_tramitado(db)

        response = await client.post(
            "/processos/resposta-final",
            json={"processo_id": str(processo.id), "unidade": "COJUR", "resposta": "Deferido"},
            headers=usr,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["resposta_final"] == "Deferido"
        assert data["unidade_resposta_final"] == "COJUR"
        assert data["concluido"] is True
        assert {a["destino"]: a["concluido"] for a in data["andamentos"]} == {"COJUR": True, "SEAD": False}

    async def test_processo_respondido_sai_dos_atrasados(self, client, db, usr):
        processo = await self._processo_tramitado(db)

        antes = await client.get("/processos", params={"atrasados": "true"}, headers=usr)
        await client.post(
            "/processos/resposta-final",
            json={"processo_id": str(processo.id), "unidade": "SEAD", "resposta": "Ciente"},
            headers=usr,
        )
        depois = await client.get("/processos", params={"atrasados": "true"}, headers=usr)

        assert antes.json()["data"]["total"] == 1
        assert depois.json()["data"]["total"] == 0

    async def test_segunda_resposta_e_conflito(self, client, db, usr):
        processo = await self._processo_tramitado(db)
        corpo = {"processo_id": str(processo.id), "unidade": "COJUR", "resposta": "Deferido"}

        await client.post("/processos/resposta-final", json=corpo, headers=usr)
        response = await client.post("/processos/resposta-final", json=corpo, headers=usr)

        assert response.status_code == 409

    async def test_unidade_fora_dos_andamentos(self, client, db, usr):
        processo = await self._processo_tramitado(db)

        response = await client.post(
            "/processos/resposta-final",
            json={"processo_id": str(processo.id), "unidade": "GAB", "resposta": "Deferido"},
            headers=usr,
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"]["unidades"] == ["COJUR", "SEAD"]

    async def test_processo_sem_andamentos(self, client, db, usr):
        processo = await novo_processo(db, NUMERO)

        response = await client.post(
            "/processos/resposta-final",
            json={"processo_id": str(processo.id), "unidade": "COJUR", "resposta": "Deferido"},
            headers=usr,
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "validation_error"
