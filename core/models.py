from django.db import models


class ConfiguracaoSistema(models.Model):
    """
    Parâmetros globais do sistema.
    Usamos um único registro (pk=1) como 'singleton'.
    """

    # IDENTIDADE DA PASTORAL
    nome_pastoral = models.CharField(
        "Nome da pastoral",
        max_length=150,
        default="Pastoral Familiar",
    )
    nome_paroquia = models.CharField(
        "Nome da paróquia",
        max_length=150,
        blank=True,
        help_text="Aparece no cabeçalho dos relatórios.",
    )
    subtitulo_ficha = models.CharField(
        "Subtítulo da ficha cadastral",
        max_length=150,
        default="Pastoral Familiar - Cadastro Paroquial",
        help_text="Linha impressa abaixo do título nas fichas em PDF.",
    )

    # MARCA
    logo = models.ImageField(
        "Logo",
        upload_to="configuracao/",
        blank=True,
        null=True,
    )
    mostrar_logo_em_relatorios = models.BooleanField(
        "Mostrar logo nos relatórios",
        default=True,
        help_text="Se marcado, o logo aparece nas fichas e relatórios em PDF.",
    )

    # COMUNICAÇÃO
    saudacao_whatsapp = models.TextField(
        "Mensagem padrão do WhatsApp",
        default="Olá, {nome}! Paz e bem!\n\n",
        help_text="Use {nome} para inserir o primeiro nome do agente.",
    )

    class Meta:
        verbose_name = "Configuração do sistema"
        verbose_name_plural = "Configuração do sistema"

    def __str__(self):
        return "Configuração do sistema"

    def save(self, *args, **kwargs):
        # Sempre o registro 1
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """
        Devolve a configuração única (cria se não existir).
        """
        obj, created = cls.objects.get_or_create(
            pk=1,
            defaults={
                "nome_pastoral": "Pastoral Familiar",
            }
        )
        return obj
