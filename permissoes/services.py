from core.services import RecordStoreService
from .models import Permissao


permissao_store = RecordStoreService(
    Permissao,
    not_found_message="Permissão com ID {id} não encontrada.",
)
