"""
URL configuration for the socialhub project.

Every query and mutation is served by the single operations endpoint; the
admin site and uploaded media are mounted alongside it.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from social.views.api_views import OperationApi, health

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/operations/', OperationApi.as_view(), name='operations'),
    path('api/health/', health, name='health'),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
