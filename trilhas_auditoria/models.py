"""
Audit Trail Model

Entries are created once, never edited, and removed only by explicit deletion.
"""

from django.db import models
from core.constants import FieldLength


class TrilhaAuditoria(models.Model):
    """
    One audited action: who did what, on which entity, and when.
    """
    usuario = models.CharField(
        max_length=FieldLength.USUARIO,
        help_text="User who performed the action"
    )
    acao = models.CharField(
        max_length=FieldLength.ACAO,
        help_text="Type of action performed, e.g. 'CRIACAO', 'EXCLUSAO'"
    )
    entidade = models.CharField(
        max_length=FieldLength.ENTIDADE,
        db_index=True,
        help_text="Type of entity affected"
    )
    registro_id = models.IntegerField(
        null=True,
        blank=True,
        help_text="ID of the entity affected"
    )
    detalhes = models.TextField(
        blank=True,
        help_text="Human-readable description of the action"
    )
    data_hora = models.DateTimeField(
        db_index=True,
        help_text="When the action occurred"
    )

    class Meta:
        verbose_name = "Trilha de Auditoria"
        verbose_name_plural = "Trilhas de Auditoria"
        ordering = ['-data_hora', '-id']
        indexes = [
            models.Index(fields=['entidade', 'registro_id'], name='trilha_entidade_registro_idx'),
        ]

    def __str__(self):
        return f"{self.usuario} - {self.acao} - {self.entidade} #{self.registro_id} - {self.data_hora}"
