from rest_framework import serializers
from .models import Permissao


class PermissaoSerializer(serializers.ModelSerializer):
    """Serializer for Permissao"""

    class Meta:
        model = Permissao
        fields = ['id', 'nome', 'descricao', 'modulo']
        read_only_fields = ['id']
