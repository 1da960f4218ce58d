from django.conf import settings
from django.db import models

TIPO_CHOICES = [
    ("info", "Informação"),
    ("success", "Sucesso"),
    ("warning", "Alerta"),
    ("error", "Erro"),
]


class Notificacao(models.Model):
    """Aviso no menu do usuário, ex: um agente que fez o próprio cadastro."""

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notificacoes",
    )
    titulo = models.CharField("Título", max_length=150)
    mensagem = models.TextField(blank=True)
    # Caminho já resolvido (ex: /agentes/)
    url_destino = models.CharField("Link", max_length=255, blank=True)
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, default="info")
    lida = models.BooleanField(default=False)
    data_criacao = models.DateTimeField("Criada em", auto_now_add=True)

    class Meta:
        verbose_name = "Notificação"
        verbose_name_plural = "Notificações"
        ordering = ["-data_criacao"]

    def __str__(self):
        return f"{self.titulo} ({self.usuario})"
