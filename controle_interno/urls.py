"""
URL configuration for controle_interno project.
"""
from django.contrib import admin
from django.urls import path, include
from django.shortcuts import redirect

from common.health import get_health_urls


def root_redirect(request):
    """Redirect root to the API index"""
    return redirect('api-root')


urlpatterns = [
    path('', root_redirect, name='root'),
    path('admin/', admin.site.urls),
    path('api/', include('api.urls')),
]

# Health check endpoints (for load balancers, monitoring)
urlpatterns += get_health_urls()
