"""
URLs da API.

Localização: api/urls.py

Centraliza todas as rotas da API REST.
"""
from django.urls import path
from lembretes import views as lembretes_views

app_name = 'api'

urlpatterns = [
    path('lembretes/', lembretes_views.lembretes_api_view, name='lembretes'),
    path('lembretes/<str:lembrete_id>/', lembretes_views.lembrete_detail_api_view, name='lembrete-detail'),
    path('categorias/', lembretes_views.categorias_api_view, name='categorias'),
    path('categorias/<str:categoria_id>/', lembretes_views.categoria_detail_api_view, name='categoria-detail'),
    path('sugestoes/', lembretes_views.sugestoes_api_view, name='sugestoes'),
    path('datas/mascara/', lembretes_views.mascara_data_api_view, name='mascara-data'),
]
