from django.contrib import admin
from .models import Politica


@admin.register(Politica)
class PoliticaAdmin(admin.ModelAdmin):
    list_display = ['id', 'nome', 'categoria', 'ativa', 'data_criacao']
    list_filter = ['ativa', 'categoria', 'data_criacao']
    search_fields = ['nome', 'descricao']
    date_hierarchy = 'data_criacao'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
