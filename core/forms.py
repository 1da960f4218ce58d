from django import forms
from .models import ConfiguracaoSistema


class ConfiguracaoGeralForm(forms.ModelForm):
    class Meta:
        model = ConfiguracaoSistema
        fields = [
            "nome_pastoral",
            "nome_paroquia",
            "subtitulo_ficha",
            "logo",
            "mostrar_logo_em_relatorios",
            "saudacao_whatsapp",
        ]
        widgets = {
            "nome_pastoral": forms.TextInput(attrs={"class": "form-input"}),
            "nome_paroquia": forms.TextInput(attrs={"class": "form-input"}),
            "subtitulo_ficha": forms.TextInput(attrs={"class": "form-input"}),
            "saudacao_whatsapp": forms.Textarea(attrs={"rows": 4}),
        }
