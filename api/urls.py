"""
API URLs for the internal-control record stores
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from core.constants import Resource
from logs_acesso.views import LogAcessoViewSet
from permissoes.views import PermissaoViewSet
from politicas.views import PoliticaViewSet
from trilhas_auditoria.views import TrilhaAuditoriaViewSet

# Routes are /api/<resource> and /api/<resource>/<id>, without trailing slash
router = DefaultRouter(trailing_slash=False)
router.register(Resource.LOGS_ACESSO, LogAcessoViewSet, basename=Resource.LOGS_ACESSO)
router.register(Resource.PERMISSOES, PermissaoViewSet, basename=Resource.PERMISSOES)
router.register(Resource.POLITICAS, PoliticaViewSet, basename=Resource.POLITICAS)
router.register(Resource.TRILHAS_AUDITORIA, TrilhaAuditoriaViewSet, basename=Resource.TRILHAS_AUDITORIA)

urlpatterns = [
    path('', include(router.urls)),
]
