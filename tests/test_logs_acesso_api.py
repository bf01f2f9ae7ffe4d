"""
Access log endpoints.
"""

import pytest

pytestmark = pytest.mark.django_db


class TestLogAcessoApi:

    def test_create_assigns_timestamp(self, create_record, assert_recent):
        created = create_record('logsacesso', {
            'usuario': 'maria.silva',
            'acao': 'LOGIN',
            'enderecoIp': '10.0.0.5',
        })

        assert created['usuario'] == 'maria.silva'
        assert created['enderecoIp'] == '10.0.0.5'
        assert created['sucesso'] is True
        assert_recent(created['dataHora'])

    def test_list_is_newest_first(self, api_client, create_record):
        create_record('logsacesso', {'usuario': 'a', 'acao': 'LOGIN', 'dataHora': '2024-01-02T10:00:00-03:00'})
        create_record('logsacesso', {'usuario': 'b', 'acao': 'LOGIN', 'dataHora': '2024-01-03T10:00:00-03:00'})
        create_record('logsacesso', {'usuario': 'c', 'acao': 'LOGIN', 'dataHora': '2024-01-01T10:00:00-03:00'})

        response = api_client.get('/api/logsacesso')

        assert response.status_code == 200
        assert [log['usuario'] for log in response.json()] == ['b', 'a', 'c']

    @pytest.mark.parametrize('missing', ['usuario', 'acao'])
    def test_required_fields(self, api_client, missing):
        payload = {'usuario': 'joao', 'acao': 'LOGIN'}
        del payload[missing]

        response = api_client.post('/api/logsacesso', payload, format='json')

        assert response.status_code == 400
        assert missing in response.json()

    def test_invalid_ip_is_bad_request(self, api_client):
        response = api_client.post(
            '/api/logsacesso',
            {'usuario': 'joao', 'acao': 'LOGIN', 'enderecoIp': 'not-an-ip'},
            format='json'
        )

        assert response.status_code == 400
        assert 'enderecoIp' in response.json()

    def test_not_found_message(self, api_client):
        response = api_client.get('/api/logsacesso/77')

        assert response.status_code == 404
        assert response.json()['detail'] == 'Log de acesso com ID 77 não encontrado.'
