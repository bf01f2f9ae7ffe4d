from rest_framework import serializers
from core.serializers import RecordTimestampField
from .models import Politica


class PoliticaSerializer(serializers.ModelSerializer):
    """Serializer for Politica, camelCase on the wire"""
    dataCriacao = RecordTimestampField(source='data_criacao')

    class Meta:
        model = Politica
        fields = ['id', 'nome', 'descricao', 'categoria', 'ativa', 'dataCriacao']
        read_only_fields = ['id']
