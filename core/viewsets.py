"""
Base ViewSet exposing a RecordStoreService over HTTP.

GET list, GET detail, POST and DELETE are routed; there is no update route.
"""
from collections.abc import Mapping

from rest_framework import status, viewsets
from rest_framework.response import Response
from rest_framework.reverse import reverse

from core.exceptions import ValidationError


class RecordStoreViewSet(viewsets.GenericViewSet):
    """
    Subclasses set ``store`` (a RecordStoreService) and ``serializer_class``.

    Errors raised by the store (NotFoundError, InternalError) are turned into
    responses by common.exceptions.api_exception_handler.
    """
    store = None
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        return self.store.repository.get_all()

    def list(self, request, *args, **kwargs):
        records = self.store.list()
        serializer = self.get_serializer(records, many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None, *args, **kwargs):
        record = self.store.get(int(pk))
        serializer = self.get_serializer(record)
        return Response(serializer.data)

    def create(self, request, *args, **kwargs):
        if not isinstance(request.data, Mapping):
            raise ValidationError(message="Dados do registro são obrigatórios.")

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        record = self.store.create(serializer.validated_data)

        data = self.get_serializer(record).data
        location = reverse(f'{self.basename}-detail', args=[record.pk], request=request)
        return Response(data, status=status.HTTP_201_CREATED, headers={'Location': location})

    def destroy(self, request, pk=None, *args, **kwargs):
        self.store.delete(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
