"""
Audit Trail Admin

Entries can be browsed and deleted but not added or edited here.
"""

from django.contrib import admin
from trilhas_auditoria.models import TrilhaAuditoria


@admin.register(TrilhaAuditoria)
class TrilhaAuditoriaAdmin(admin.ModelAdmin):
    list_display = [
        'id',
        'data_hora',
        'usuario',
        'acao',
        'entidade',
        'registro_id',
        'detalhes_short',
    ]

    list_filter = [
        'acao',
        'entidade',
        'data_hora',
    ]

    search_fields = [
        'usuario',
        'detalhes',
        'entidade',
    ]

    date_hierarchy = 'data_hora'
    ordering = ['-data_hora', '-id']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    @admin.display(description='Detalhes')
    def detalhes_short(self, obj):
        if len(obj.detalhes) > 60:
            return obj.detalhes[:60] + '...'
        return obj.detalhes
