from django.db import models
from core.constants import FieldLength


class Politica(models.Model):
    """Internal-control policy"""
    nome = models.CharField(max_length=FieldLength.NOME)
    descricao = models.TextField(blank=True)
    categoria = models.CharField(
        max_length=FieldLength.CATEGORIA,
        blank=True,
        help_text="e.g. 'Segurança da Informação', 'Financeiro'"
    )
    ativa = models.BooleanField(default=True)
    data_criacao = models.DateTimeField(
        db_index=True,
        help_text="When the policy was created"
    )

    class Meta:
        verbose_name = "Política"
        verbose_name_plural = "Políticas"
        ordering = ['id']

    def __str__(self):
        return self.nome
