from django.apps import AppConfig


class LogsAcessoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'logs_acesso'
    verbose_name = 'Logs de Acesso'
