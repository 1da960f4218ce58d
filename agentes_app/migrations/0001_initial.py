import datetime
import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Agente",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("login", models.CharField(help_text="Usado junto com a data de nascimento para entrar no sistema.", max_length=50, unique=True)),
                ("foto", models.ImageField(blank=True, null=True, upload_to="agentes/fotos/")),
                ("nome_completo", models.CharField(max_length=150)),
                ("data_nascimento", models.DateField()),
                ("estado_civil", models.CharField(choices=[("Solteiro(a)", "Solteiro(a)"), ("Casado(a)", "Casado(a)"), ("Viúvo(a)", "Viúvo(a)"), ("Separado(a)", "Separado(a)")], max_length=20)),
                ("nome_conjuge", models.CharField(blank=True, max_length=150, verbose_name="Nome do cônjuge")),
                ("data_casamento", models.DateField(blank=True, null=True)),
                ("telefone", models.CharField(max_length=20)),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="E-mail")),
                ("cep", models.CharField(blank=True, max_length=9, verbose_name="CEP")),
                ("logradouro", models.CharField(blank=True, max_length=255, verbose_name="Endereço")),
                ("bairro", models.CharField(blank=True, max_length=100)),
                ("cidade", models.CharField(blank=True, max_length=100)),
                ("uf", models.CharField(blank=True, max_length=2, verbose_name="UF")),
                ("possui_veiculo", models.BooleanField(default=False, verbose_name="Possui veículo")),
                ("modelo_veiculo", models.CharField(blank=True, max_length=100, verbose_name="Modelo do veículo")),
                ("paroquia", models.CharField(blank=True, max_length=150, verbose_name="Paróquia")),
                ("comunidade", models.CharField(blank=True, max_length=150)),
                ("setor", models.CharField(choices=[("Pré-matrimonial", "Pré-matrimonial"), ("Pós-matrimonial", "Pós-matrimonial"), ("Casos Especiais", "Casos Especiais"), ("Serviço à Vida", "Serviço à Vida"), ("Coordenador Paróquial", "Coordenador Paróquial")], max_length=30)),
                ("funcao", models.CharField(choices=[("Agente", "Agente"), ("Coordenador", "Coordenador")], default="Agente", max_length=20, verbose_name="Função")),
                ("data_ingresso", models.DateField(blank=True, default=datetime.date.today, null=True)),
                ("observacoes", models.TextField(blank=True, verbose_name="Observações")),
                ("criado_em", models.DateTimeField(auto_now_add=True)),
                ("atualizado_em", models.DateTimeField(auto_now=True)),
                ("usuario", models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="agente", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Agente",
                "verbose_name_plural": "Agentes",
                "ordering": ["nome_completo"],
            },
        ),
        migrations.CreateModel(
            name="EnvioWhatsApp",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("lote", models.UUIDField(db_index=True, default=uuid.uuid4)),
                ("telefone", models.CharField(max_length=20)),
                ("mensagem", models.TextField()),
                ("estado", models.CharField(choices=[("pendente", "Pendente"), ("enviado", "Enviado")], default="pendente", max_length=20)),
                ("criado_em", models.DateTimeField(auto_now_add=True)),
                ("enviado_em", models.DateTimeField(blank=True, null=True)),
                ("agente", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="envios_whatsapp", to="agentes_app.agente")),
                ("criado_por", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="envios_whatsapp", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Envio de WhatsApp",
                "verbose_name_plural": "Envios de WhatsApp",
                "ordering": ["criado_em", "id"],
            },
        ),
    ]
