"""
RecordStoreService used directly, without HTTP.
"""

from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.db import DatabaseError
from django.utils import timezone

from core.exceptions import InternalError, NotFoundError
from core.services import is_unset_timestamp
from logs_acesso.services import log_acesso_store
from permissoes.services import permissao_store
from politicas.services import politica_store


class TestIsUnsetTimestamp:

    def test_none(self):
        assert is_unset_timestamp(None)

    def test_zero_date(self):
        assert is_unset_timestamp(datetime.min)

    def test_zero_date_with_timezone(self):
        assert is_unset_timestamp(datetime.min.replace(tzinfo=dt_timezone.utc))

    def test_real_date(self):
        assert not is_unset_timestamp(datetime(2024, 5, 1, 12, 0, tzinfo=dt_timezone.utc))


@pytest.mark.django_db
class TestRecordStoreService:

    def test_ids_are_never_reused(self):
        first = permissao_store.create({'nome': 'A'})
        permissao_store.delete(first.pk)
        second = permissao_store.create({'nome': 'B'})

        assert second.pk != first.pk

    def test_ids_are_unique(self):
        ids = [permissao_store.create({'nome': f'P{i}'}).pk for i in range(5)]

        assert len(set(ids)) == 5

    def test_get_returns_what_create_stored(self):
        created = politica_store.create({'nome': 'Política', 'categoria': 'Auditoria'})

        fetched = politica_store.get(created.pk)

        assert fetched.pk == created.pk
        assert fetched.nome == created.nome
        assert fetched.data_criacao == created.data_criacao

    def test_timestamp_kept_when_provided(self):
        when = timezone.now() - timedelta(days=30)

        created = log_acesso_store.create({'usuario': 'u', 'acao': 'LOGIN', 'data_hora': when})

        assert created.data_hora == when

    def test_timestamp_set_when_zero(self):
        created = log_acesso_store.create({
            'usuario': 'u',
            'acao': 'LOGIN',
            'data_hora': datetime.min.replace(tzinfo=dt_timezone.utc),
        })

        assert abs(timezone.now() - created.data_hora) < timedelta(minutes=1)

    def test_payload_is_not_mutated(self):
        payload = {'nome': 'Política'}

        politica_store.create(payload)

        assert payload == {'nome': 'Política'}

    def test_list_counts_after_creates_and_deletes(self):
        ids = [log_acesso_store.create({'usuario': f'u{i}', 'acao': 'LOGIN'}).pk for i in range(6)]
        for record_id in ids[::2]:
            log_acesso_store.delete(record_id)

        records = log_acesso_store.list()

        assert sorted(r.pk for r in records) == sorted(ids[1::2])
        timestamps = [r.data_hora for r in records]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_get_unknown_raises_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            politica_store.get(404)

        assert exc_info.value.resource_type == 'Politica'
        assert exc_info.value.resource_id == 404
        assert exc_info.value.message == 'Política com ID 404 não encontrada.'

    def test_delete_unknown_leaves_collection_unchanged(self):
        politica_store.create({'nome': 'Fica'})

        with pytest.raises(NotFoundError):
            politica_store.delete(999)

        assert len(politica_store.list()) == 1

    def test_storage_failure_becomes_internal_error(self, monkeypatch):
        def broken(**kwargs):
            raise DatabaseError('database is locked')

        monkeypatch.setattr(politica_store.repository, 'create', broken)

        with pytest.raises(InternalError) as exc_info:
            politica_store.create({'nome': 'Nunca salva'})

        assert exc_info.value.message == 'database is locked'
        assert isinstance(exc_info.value.__cause__, DatabaseError)
