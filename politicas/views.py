from core.viewsets import RecordStoreViewSet
from .serializers import PoliticaSerializer
from .services import politica_store


class PoliticaViewSet(RecordStoreViewSet):
    store = politica_store
    serializer_class = PoliticaSerializer
