from django.contrib import admin
from .models import LogAcesso


@admin.register(LogAcesso)
class LogAcessoAdmin(admin.ModelAdmin):
    """
    Access logs are viewable and deletable, never editable.
    """
    list_display = ['id', 'data_hora', 'usuario', 'acao', 'recurso', 'endereco_ip', 'sucesso']
    list_filter = ['sucesso', 'acao', 'data_hora']
    search_fields = ['usuario', 'acao', 'recurso', 'endereco_ip']
    date_hierarchy = 'data_hora'
    ordering = ['-data_hora', '-id']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
