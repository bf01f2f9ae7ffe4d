from core.services import RecordStoreService
from .models import Politica


politica_store = RecordStoreService(
    Politica,
    timestamp_field='data_criacao',
    not_found_message="Política com ID {id} não encontrada.",
)
