from core.viewsets import RecordStoreViewSet
from .serializers import LogAcessoSerializer
from .services import log_acesso_store


class LogAcessoViewSet(RecordStoreViewSet):
    """
    Access logs, newest first.
    """
    store = log_acesso_store
    serializer_class = LogAcessoSerializer
