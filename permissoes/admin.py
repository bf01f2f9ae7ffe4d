from django.contrib import admin
from .models import Permissao


@admin.register(Permissao)
class PermissaoAdmin(admin.ModelAdmin):
    list_display = ['id', 'nome', 'modulo']
    list_filter = ['modulo']
    search_fields = ['nome', 'descricao', 'modulo']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
