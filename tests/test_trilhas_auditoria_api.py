"""
Audit trail endpoints.
"""

import pytest

pytestmark = pytest.mark.django_db


def trail(**overrides):
    payload = {
        'usuario': 'admin',
        'acao': 'EXCLUSAO',
        'entidade': 'Politica',
        'entidadeId': 3,
        'detalhes': 'Política removida',
    }
    payload.update(overrides)
    return payload


class TestTrilhaAuditoriaApi:

    def test_create_and_get(self, api_client, create_record, assert_recent):
        created = create_record('trilhasauditoria', trail())

        assert created['entidade'] == 'Politica'
        assert created['entidadeId'] == 3
        assert_recent(created['dataHora'])

        response = api_client.get(f"/api/trilhasauditoria/{created['id']}")
        assert response.json() == created

    def test_entidade_id_is_optional(self, create_record):
        payload = trail()
        del payload['entidadeId']

        created = create_record('trilhasauditoria', payload)

        assert created['entidadeId'] is None

    def test_entidade_is_required(self, api_client):
        payload = trail()
        del payload['entidade']

        response = api_client.post('/api/trilhasauditoria', payload, format='json')

        assert response.status_code == 400
        assert 'entidade' in response.json()

    def test_list_is_newest_first(self, api_client, create_record):
        create_record('trilhasauditoria', trail(detalhes='antiga', dataHora='2022-06-01T08:00:00-03:00'))
        create_record('trilhasauditoria', trail(detalhes='agora'))
        create_record('trilhasauditoria', trail(detalhes='meio', dataHora='2023-06-01T08:00:00-03:00'))

        response = api_client.get('/api/trilhasauditoria')

        assert [t['detalhes'] for t in response.json()] == ['agora', 'meio', 'antiga']

    def test_not_found_message(self, api_client):
        response = api_client.delete('/api/trilhasauditoria/5')

        assert response.status_code == 404
        assert response.json()['detail'] == 'Trilha de auditoria com ID 5 não encontrada.'

    @pytest.mark.parametrize('entidade_id', [10 ** 20, -(10 ** 20), 2147483648])
    def test_out_of_range_entidade_id_is_bad_request(self, api_client, entidade_id):
        response = api_client.post('/api/trilhasauditoria', trail(entidadeId=entidade_id), format='json')

        assert response.status_code == 400
        assert 'entidadeId' in response.json()

    def test_zero_date_with_offset_defaults_to_now(self, create_record, assert_recent):
        created = create_record('trilhasauditoria', trail(dataHora='0001-01-01T00:00:00Z'))

        assert_recent(created['dataHora'])
