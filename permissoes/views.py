from core.viewsets import RecordStoreViewSet
from .serializers import PermissaoSerializer
from .services import permissao_store


class PermissaoViewSet(RecordStoreViewSet):
    store = permissao_store
    serializer_class = PermissaoSerializer
