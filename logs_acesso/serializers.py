from rest_framework import serializers
from core.serializers import RecordTimestampField
from .models import LogAcesso


class LogAcessoSerializer(serializers.ModelSerializer):
    """Serializer for LogAcesso, camelCase on the wire"""
    enderecoIp = serializers.IPAddressField(
        source='endereco_ip', required=False, allow_null=True
    )
    dataHora = RecordTimestampField(source='data_hora')

    class Meta:
        model = LogAcesso
        fields = ['id', 'usuario', 'acao', 'recurso', 'enderecoIp', 'sucesso', 'dataHora']
        read_only_fields = ['id']
