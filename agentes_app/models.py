import uuid
from datetime import date

from django.conf import settings
from django.db import models

from .utils import calcular_idade, descricao_bodas, montar_link_whatsapp


ESTADO_CIVIL_SOLTEIRO = "Solteiro(a)"
ESTADO_CIVIL_CASADO = "Casado(a)"
ESTADO_CIVIL_VIUVO = "Viúvo(a)"
ESTADO_CIVIL_SEPARADO = "Separado(a)"

ESTADO_CIVIL_CHOICES = [
    (ESTADO_CIVIL_SOLTEIRO, "Solteiro(a)"),
    (ESTADO_CIVIL_CASADO, "Casado(a)"),
    (ESTADO_CIVIL_VIUVO, "Viúvo(a)"),
    (ESTADO_CIVIL_SEPARADO, "Separado(a)"),
]


SETOR_PRE_MATRIMONIAL = "Pré-matrimonial"
SETOR_POS_MATRIMONIAL = "Pós-matrimonial"
SETOR_CASOS_ESPECIAIS = "Casos Especiais"
SETOR_SERVICO_VIDA = "Serviço à Vida"
SETOR_COORDENADOR = "Coordenador Paróquial"

SETOR_CHOICES = [
    (SETOR_PRE_MATRIMONIAL, "Pré-matrimonial"),
    (SETOR_POS_MATRIMONIAL, "Pós-matrimonial"),
    (SETOR_CASOS_ESPECIAIS, "Casos Especiais"),
    (SETOR_SERVICO_VIDA, "Serviço à Vida"),
    (SETOR_COORDENADOR, "Coordenador Paróquial"),
]


FUNCAO_AGENTE = "Agente"
FUNCAO_COORDENADOR = "Coordenador"

FUNCAO_CHOICES = [
    (FUNCAO_AGENTE, "Agente"),
    (FUNCAO_COORDENADOR, "Coordenador"),
]


def normalizar_login(valor):
    """Login é guardado sem espaços nas pontas e em maiúsculas."""
    return (valor or "").strip().upper()


class Agente(models.Model):
    # --- Acesso ---
    login = models.CharField(
        max_length=50,
        unique=True,
        help_text="Usado junto com a data de nascimento para entrar no sistema.",
    )
    usuario = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="agente",
    )

    # --- Informação pessoal ---
    foto = models.ImageField(upload_to="agentes/fotos/", blank=True, null=True)
    nome_completo = models.CharField(max_length=150)
    data_nascimento = models.DateField()
    estado_civil = models.CharField(max_length=20, choices=ESTADO_CIVIL_CHOICES)
    nome_conjuge = models.CharField("Nome do cônjuge", max_length=150, blank=True)
    data_casamento = models.DateField(blank=True, null=True)

    # --- Contato ---
    telefone = models.CharField(max_length=20)
    email = models.EmailField("E-mail", blank=True)

    # --- Endereço ---
    cep = models.CharField("CEP", max_length=9, blank=True)
    logradouro = models.CharField("Endereço", max_length=255, blank=True)
    bairro = models.CharField(max_length=100, blank=True)
    cidade = models.CharField(max_length=100, blank=True)
    uf = models.CharField("UF", max_length=2, blank=True)

    possui_veiculo = models.BooleanField("Possui veículo", default=False)
    modelo_veiculo = models.CharField("Modelo do veículo", max_length=100, blank=True)

    # --- Informação pastoral ---
    paroquia = models.CharField("Paróquia", max_length=150, blank=True)
    comunidade = models.CharField(max_length=150, blank=True)
    setor = models.CharField(max_length=30, choices=SETOR_CHOICES)
    funcao = models.CharField("Função", max_length=20, choices=FUNCAO_CHOICES, default=FUNCAO_AGENTE)
    data_ingresso = models.DateField(default=date.today, blank=True, null=True)

    observacoes = models.TextField("Observações", blank=True)

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Agente"
        verbose_name_plural = "Agentes"
        ordering = ["nome_completo"]

    def __str__(self):
        return self.nome_completo

    def save(self, *args, **kwargs):
        self.login = normalizar_login(self.login)

        if self.estado_civil != ESTADO_CIVIL_CASADO:
            self.nome_conjuge = ""
            self.data_casamento = None

        if not self.possui_veiculo:
            self.modelo_veiculo = ""

        super().save(*args, **kwargs)

    @property
    def primeiro_nome(self):
        return (self.nome_completo or "").split(" ")[0]

    @property
    def e_coordenador(self):
        return (self.funcao or "").strip().lower() == FUNCAO_COORDENADOR.lower()

    @property
    def e_casado(self):
        return self.estado_civil == ESTADO_CIVIL_CASADO

    @property
    def idade(self):
        return calcular_idade(self.data_nascimento)

    @property
    def bodas(self):
        """Ex: 'Bodas de Prata (25 anos)' para casados com data de casamento."""
        if not self.e_casado or not self.data_casamento:
            return None
        return descricao_bodas(self.data_casamento)


class EnvioWhatsApp(models.Model):
    """
    Uma mensagem de WhatsApp dentro de um envio em massa.
    Todas as mensagens de um mesmo envio compartilham o mesmo lote.
    """

    ESTADO_PENDENTE = "pendente"
    ESTADO_ENVIADO = "enviado"

    ESTADO_CHOICES = [
        (ESTADO_PENDENTE, "Pendente"),
        (ESTADO_ENVIADO, "Enviado"),
    ]

    lote = models.UUIDField(default=uuid.uuid4, db_index=True)
    agente = models.ForeignKey(
        Agente,
        on_delete=models.CASCADE,
        related_name="envios_whatsapp",
    )
    telefone = models.CharField(max_length=20)
    mensagem = models.TextField()
    estado = models.CharField(max_length=20, choices=ESTADO_CHOICES, default=ESTADO_PENDENTE)

    criado_em = models.DateTimeField(auto_now_add=True)
    enviado_em = models.DateTimeField(blank=True, null=True)
    criado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="envios_whatsapp",
    )

    class Meta:
        verbose_name = "Envio de WhatsApp"
        verbose_name_plural = "Envios de WhatsApp"
        ordering = ["criado_em", "id"]

    def __str__(self):
        return f"{self.agente} - {self.get_estado_display()}"

    @property
    def link(self):
        return montar_link_whatsapp(self.telefone, self.mensagem)
