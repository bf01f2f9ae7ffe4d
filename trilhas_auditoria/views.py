from core.viewsets import RecordStoreViewSet
from .serializers import TrilhaAuditoriaSerializer
from .services import trilha_auditoria_store


class TrilhaAuditoriaViewSet(RecordStoreViewSet):
    """
    Audit trail entries, newest first.
    """
    store = trilha_auditoria_store
    serializer_class = TrilhaAuditoriaSerializer
