from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ConfiguracaoSistema",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome_pastoral", models.CharField(default="Pastoral Familiar", max_length=150, verbose_name="Nome da pastoral")),
                ("nome_paroquia", models.CharField(blank=True, help_text="Aparece no cabeçalho dos relatórios.", max_length=150, verbose_name="Nome da paróquia")),
                ("subtitulo_ficha", models.CharField(default="Pastoral Familiar - Cadastro Paroquial", help_text="Linha impressa abaixo do título nas fichas em PDF.", max_length=150, verbose_name="Subtítulo da ficha cadastral")),
                ("logo", models.ImageField(blank=True, null=True, upload_to="configuracao/", verbose_name="Logo")),
                ("mostrar_logo_em_relatorios", models.BooleanField(default=True, help_text="Se marcado, o logo aparece nas fichas e relatórios em PDF.", verbose_name="Mostrar logo nos relatórios")),
                ("saudacao_whatsapp", models.TextField(default="Olá, {nome}! Paz e bem!\n\n", help_text="Use {nome} para inserir o primeiro nome do agente.", verbose_name="Mensagem padrão do WhatsApp")),
            ],
            options={
                "verbose_name": "Configuração do sistema",
                "verbose_name_plural": "Configuração do sistema",
            },
        ),
    ]
