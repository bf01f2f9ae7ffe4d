from rest_framework import serializers
from core.serializers import RecordTimestampField
from .models import TrilhaAuditoria


class TrilhaAuditoriaSerializer(serializers.ModelSerializer):
    """Serializer for TrilhaAuditoria, camelCase on the wire"""
    entidadeId = serializers.IntegerField(
        source='registro_id', required=False, allow_null=True,
        min_value=-2147483648, max_value=2147483647
    )
    dataHora = RecordTimestampField(source='data_hora')

    class Meta:
        model = TrilhaAuditoria
        fields = ['id', 'usuario', 'acao', 'entidade', 'entidadeId', 'detalhes', 'dataHora']
        read_only_fields = ['id']
