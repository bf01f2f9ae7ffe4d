"""
Access log record store.
"""
from core.services import RecordStoreService
from .models import LogAcesso


log_acesso_store = RecordStoreService(
    LogAcesso,
    ordering=['-data_hora', '-id'],
    timestamp_field='data_hora',
    not_found_message="Log de acesso com ID {id} não encontrado.",
)
