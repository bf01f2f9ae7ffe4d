from django.apps import AppConfig


class TrilhasAuditoriaConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'trilhas_auditoria'
    verbose_name = 'Trilhas de Auditoria'
