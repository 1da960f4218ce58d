from datetime import date

from django import forms

from .models import (
    Agente,
    ESTADO_CIVIL_CASADO,
    FUNCAO_AGENTE,
    normalizar_login,
)
from .utils import converter_data_login, formatar_cep, formatar_telefone


def _campo_data():
    return forms.DateInput(
        format="%Y-%m-%d",
        attrs={
            "type": "date",
            "min": "1900-01-01",
            "max": date.today().isoformat(),
        },
    )


class LoginForm(forms.Form):
    login = forms.CharField(
        label="Login",
        required=False,
        widget=forms.TextInput(attrs={"placeholder": "Seu login", "autocomplete": "username"}),
    )
    data_nascimento = forms.CharField(
        label="Data de nascimento",
        required=False,
        widget=forms.TextInput(
            attrs={
                "placeholder": "DD/MM/AAAA",
                "inputmode": "numeric",
                "maxlength": "10",
                "data-mascara": "data",
            }
        ),
    )

    def clean(self):
        cleaned = super().clean()
        login = (cleaned.get("login") or "").strip()
        texto_data = (cleaned.get("data_nascimento") or "").strip()

        if not login or not texto_data:
            raise forms.ValidationError("Login e data de nascimento são obrigatórios.")

        data = converter_data_login(texto_data)
        if data is None:
            raise forms.ValidationError("Data de nascimento inválida. Use o formato DD/MM/AAAA.")

        cleaned["login"] = login
        cleaned["data_nascimento"] = data
        return cleaned


class AgenteForm(forms.ModelForm):
    """
    Formulário completo do agente (coordenação).
    """

    class Meta:
        model = Agente
        exclude = (
            "usuario",
            "criado_em",
            "atualizado_em",
        )

        labels = {
            "login": "Login",
            "foto": "Foto",
            "nome_completo": "Nome completo",
            "data_nascimento": "Data de nascimento",
            "estado_civil": "Estado civil",
            "nome_conjuge": "Nome do cônjuge",
            "data_casamento": "Data de casamento",
            "telefone": "Telefone",
            "email": "E-mail",
            "cep": "CEP",
            "logradouro": "Endereço",
            "bairro": "Bairro",
            "cidade": "Cidade",
            "uf": "UF",
            "possui_veiculo": "Possui veículo?",
            "modelo_veiculo": "Modelo do veículo",
            "paroquia": "Paróquia",
            "comunidade": "Comunidade",
            "setor": "Setor",
            "funcao": "Função",
            "data_ingresso": "Data de ingresso",
            "observacoes": "Observações",
        }

        widgets = {
            "login": forms.TextInput(attrs={"placeholder": "Ex: MARIA.SILVA", "autocomplete": "off"}),
            "nome_completo": forms.TextInput(attrs={"placeholder": "Nome completo"}),
            "data_nascimento": _campo_data(),
            "data_casamento": _campo_data(),
            "data_ingresso": _campo_data(),
            "telefone": forms.TextInput(
                attrs={"type": "tel", "placeholder": "(00) 00000-0000", "data-mascara": "telefone"}
            ),
            "email": forms.EmailInput(attrs={"placeholder": "email@exemplo.com"}),
            "cep": forms.TextInput(
                attrs={"placeholder": "00000-000", "maxlength": "9", "data-mascara": "cep"}
            ),
            "uf": forms.TextInput(attrs={"maxlength": "2"}),
            "observacoes": forms.Textarea(attrs={"rows": 3}),
            "foto": forms.ClearableFileInput(attrs={"accept": "image/*"}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # Login não muda depois do cadastro
        if self.instance and self.instance.pk:
            self.fields["login"].disabled = True
            self.fields["login"].help_text = "O login não pode ser alterado."

    def clean_login(self):
        login = normalizar_login(self.cleaned_data.get("login"))
        if not login:
            raise forms.ValidationError("Informe o login.")

        qs = Agente.objects.filter(login__iexact=login)
        if self.instance and self.instance.pk:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise forms.ValidationError("Este login já está em uso. Por favor, escolha outro.")

        return login

    def clean_telefone(self):
        telefone = formatar_telefone(self.cleaned_data.get("telefone"))
        if not telefone:
            raise forms.ValidationError("Informe um telefone válido.")
        return telefone

    def clean_cep(self):
        return formatar_cep(self.cleaned_data.get("cep"))

    def clean_uf(self):
        return (self.cleaned_data.get("uf") or "").strip().upper()

    def clean(self):
        cleaned = super().clean()

        if cleaned.get("estado_civil") != ESTADO_CIVIL_CASADO:
            cleaned["nome_conjuge"] = ""
            cleaned["data_casamento"] = None

        if not cleaned.get("possui_veiculo"):
            cleaned["modelo_veiculo"] = ""

        return cleaned


class AgentePerfilForm(AgenteForm):
    """
    O próprio agente editando seu cadastro: sem o campo de função.
    """

    class Meta(AgenteForm.Meta):
        exclude = AgenteForm.Meta.exclude + ("funcao",)


class AgenteRegistroForm(AgentePerfilForm):
    """
    Primeiro cadastro feito pelo próprio agente.
    A função é sempre 'Agente'.
    """

    def save(self, commit=True):
        agente = super().save(commit=False)
        agente.funcao = FUNCAO_AGENTE
        if commit:
            agente.save()
        return agente
