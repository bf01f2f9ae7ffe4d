from core.services import RecordStoreService
from .models import TrilhaAuditoria


trilha_auditoria_store = RecordStoreService(
    TrilhaAuditoria,
    ordering=['-data_hora', '-id'],
    timestamp_field='data_hora',
    not_found_message="Trilha de auditoria com ID {id} não encontrada.",
)
