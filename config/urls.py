"""
URLs principais do projeto.

Localização: config/urls.py
"""
from django.urls import include, path

urlpatterns = [
    path('api/', include('api.urls')),
    path('', include('lembretes.urls')),
]
