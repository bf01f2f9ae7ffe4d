from django.apps import AppConfig


class PermissoesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'permissoes'
    verbose_name = 'Permissões'
