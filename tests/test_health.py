"""
Health endpoints and the root / API index routes.
"""

import pytest

from core.constants import Resource

pytestmark = pytest.mark.django_db


class TestHealth:

    def test_liveness(self, client):
        response = client.get('/health/')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_readiness(self, client):
        response = client.get('/health/ready/')

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'ready'
        assert body['checks'] == {'database': True, 'cache': True}

    def test_deep_counts_records(self, client, create_record):
        create_record('politicas', {'nome': 'P'})

        response = client.get('/health/deep/')

        assert response.status_code == 200
        details = response.json()['checks']['models']['details']
        assert details == {
            Resource.LOGS_ACESSO: 0,
            Resource.PERMISSOES: 0,
            Resource.POLITICAS: 1,
            Resource.TRILHAS_AUDITORIA: 0,
        }

    def test_post_not_allowed(self, client):
        assert client.post('/health/').status_code == 405


class TestIndex:

    def test_root_redirects_to_api(self, client):
        response = client.get('/')

        assert response.status_code == 302
        assert response['Location'] == '/api/'

    def test_api_root_lists_resources(self, api_client):
        response = api_client.get('/api/')

        assert response.status_code == 200
        assert set(response.json()) == set(Resource.ALL)
