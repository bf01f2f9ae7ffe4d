from django.db import models
from core.constants import FieldLength


class LogAcesso(models.Model):
    """
    Access log entry.

    Created once and never modified; removed only by explicit deletion.
    """
    usuario = models.CharField(
        max_length=FieldLength.USUARIO,
        help_text="User who accessed the system"
    )
    acao = models.CharField(
        max_length=FieldLength.ACAO,
        help_text="Action performed, e.g. 'LOGIN', 'CONSULTA'"
    )
    recurso = models.CharField(
        max_length=FieldLength.RECURSO,
        blank=True,
        help_text="Resource that was accessed"
    )
    endereco_ip = models.GenericIPAddressField(
        null=True,
        blank=True,
        help_text="IP address of the client"
    )
    sucesso = models.BooleanField(
        default=True,
        help_text="Whether the access succeeded"
    )
    data_hora = models.DateTimeField(
        db_index=True,
        help_text="When the access happened"
    )

    class Meta:
        verbose_name = "Log de Acesso"
        verbose_name_plural = "Logs de Acesso"
        ordering = ['-data_hora', '-id']

    def __str__(self):
        return f"{self.usuario} - {self.acao} - {self.data_hora}"
