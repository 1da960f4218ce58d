from django.contrib import admin
from django.urls import path, include
from django.conf.urls.static import static
from django.conf import settings


urlpatterns = [
    path("admin/", admin.site.urls),

    # Rota principal (redireciona conforme a sessão)
    path("", include("core.urls")),

    # Cadastro de agentes (login, lista, fichas, relatórios, WhatsApp)
    path("agentes/", include("agentes_app.urls")),

    path("notificacoes/", include("notificacoes_app.urls")),
]

# Para servir arquivos estáticos e media em desenvolvimento
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
