"""
Shared fixtures for the API tests.
"""
from datetime import timedelta

import pytest
from django.utils import timezone
from django.utils.dateparse import parse_datetime
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def assert_recent():
    """Assert an ISO timestamp string is within a minute of now"""
    def _assert_recent(value):
        parsed = parse_datetime(value)
        assert parsed is not None, f"not a datetime: {value!r}"
        assert abs(timezone.now() - parsed) < timedelta(minutes=1)
    return _assert_recent


@pytest.fixture
def create_record(api_client):
    """POST a payload to /api/<resource> and return the created record"""
    def _create(resource, payload):
        response = api_client.post(f'/api/{resource}', payload, format='json')
        assert response.status_code == 201, response.content
        return response.json()
    return _create
