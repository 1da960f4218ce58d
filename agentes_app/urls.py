from django.urls import path
from . import views

app_name = "agentes_app"

urlpatterns = [
    # Acesso
    path("entrar/", views.login_view, name="login"),
    path("sair/", views.logout_view, name="logout"),
    path("primeiro-acesso/", views.registro, name="registro"),

    # Cadastro
    path("", views.lista, name="lista"),
    path("novo/", views.criar, name="criar"),
    path("meu-cadastro/", views.meu_cadastro, name="meu_cadastro"),
    path("<int:pk>/editar/", views.editar, name="editar"),
    path("<int:pk>/excluir/", views.excluir, name="excluir"),
    path("<int:pk>/ficha.pdf", views.ficha_pdf, name="ficha_pdf"),

    # Relatórios
    path("relatorios/", views.relatorios, name="relatorios"),
    path("relatorios/pdf/", views.relatorio_pdf, name="relatorio_pdf"),
    path("relatorios/aniversariantes/", views.aniversariantes, name="aniversariantes"),

    # Exportações
    path("exportar/csv/", views.exportar_csv, name="exportar_csv"),
    path("exportar/excel/", views.exportar_excel, name="exportar_excel"),
    path("exportar/fichas.pdf", views.exportar_fichas_pdf, name="exportar_fichas_pdf"),

    # WhatsApp
    path("whatsapp/novo/", views.whatsapp_novo, name="whatsapp_novo"),
    path("whatsapp/lote/<uuid:lote>/", views.whatsapp_lote, name="whatsapp_lote"),
    path("whatsapp/envio/<int:pk>/abrir/", views.whatsapp_abrir, name="whatsapp_abrir"),

    # API
    path("api/cep/", views.api_buscar_cep, name="api_buscar_cep"),
]
