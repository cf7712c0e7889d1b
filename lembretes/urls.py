"""
URLs do app lembretes.

Localização: lembretes/urls.py

Define as rotas das páginas de lembretes e categorias.
"""
from django.urls import path
from . import views

app_name = 'lembretes'

urlpatterns = [
    path('', views.index_view, name='index'),
    path('<int:lembrete_id>/editar/', views.editar_view, name='editar'),
    path('<int:lembrete_id>/excluir/', views.excluir_view, name='excluir'),
    path('<int:lembrete_id>/concluir/', views.concluir_view, name='concluir'),
    path('categorias/', views.categorias_view, name='categorias'),
    path('categorias/<int:categoria_id>/excluir/', views.excluir_categoria_view, name='excluir-categoria'),
]
