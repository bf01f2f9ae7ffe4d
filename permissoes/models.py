from django.db import models
from core.constants import FieldLength


class Permissao(models.Model):
    """A named permission, optionally scoped to a system module"""
    nome = models.CharField(max_length=FieldLength.NOME)
    descricao = models.TextField(blank=True)
    modulo = models.CharField(
        max_length=FieldLength.MODULO,
        blank=True,
        help_text="System module the permission applies to"
    )

    class Meta:
        verbose_name = "Permissão"
        verbose_name_plural = "Permissões"
        ordering = ['id']

    def __str__(self):
        return self.nome
