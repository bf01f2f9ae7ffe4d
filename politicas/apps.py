from django.apps import AppConfig
from django.db.models.signals import post_migrate


class PoliticasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'politicas'
    verbose_name = 'Políticas'

    def ready(self):
        """Seed initial data after migrations"""
        from .seed import seed_on_migrate
        post_migrate.connect(seed_on_migrate, sender=self)
