from datetime import date

import pytest

from agentes_app.utils import (
    anos_de_casamento,
    calcular_idade,
    converter_data_login,
    descricao_bodas,
    formatar_cep,
    formatar_data_br,
    formatar_telefone,
    montar_link_whatsapp,
    nome_bodas,
    normalizar_telefone_whatsapp,
    personalizar_mensagem,
    porcentagem,
    slug_arquivo,
)


@pytest.mark.parametrize(
    "entrada, esperado",
    [
        ("11987654321", "(11) 98765-4321"),
        ("1133334444", "(11) 3333-4444"),
        ("(11) 3333-4444", "(11) 3333-4444"),
        ("119876543210000", "(11) 98765-4321"),
        ("11", "(11"),
        ("1198", "(11) 98"),
        ("", ""),
        ("abc", ""),
    ],
)
def test_formatar_telefone(entrada, esperado):
    assert formatar_telefone(entrada) == esperado


def test_formatar_cep():
    assert formatar_cep("01001000") == "01001-000"
    assert formatar_cep("01001-000") == "01001-000"
    assert formatar_cep("0100") == "0100"
    assert formatar_cep(None) == ""


def test_calcular_idade_antes_e_depois_do_aniversario():
    nascimento = date(1980, 3, 15)
    assert calcular_idade(nascimento, date(2020, 3, 14)) == 39
    assert calcular_idade(nascimento, date(2020, 3, 15)) == 40
    assert calcular_idade(None) is None


def test_converter_data_login_aceita_mascara_e_iso():
    assert converter_data_login("15/03/1980") == date(1980, 3, 15)
    assert converter_data_login(" 1980-03-15 ") == date(1980, 3, 15)
    assert converter_data_login("1980-03-15T00:00:00") == date(1980, 3, 15)


@pytest.mark.parametrize("texto", ["", "31/02/1980", "15-03-1980", "ontem", None])
def test_converter_data_login_invalida(texto):
    assert converter_data_login(texto) is None


def test_formatar_data_br():
    assert formatar_data_br(date(2024, 1, 5)) == "05/01/2024"
    assert formatar_data_br(None) == ""


class TestBodas:
    def test_nomes_conhecidos(self):
        assert nome_bodas(1) == "Papel"
        assert nome_bodas(25) == "Prata"
        assert nome_bodas(50) == "Ouro"
        assert nome_bodas(75) == "Brilhante"

    def test_anos_sem_nome(self):
        assert nome_bodas(16) is None
        assert nome_bodas(None) is None

    def test_anos_de_casamento(self):
        assert anos_de_casamento(date(2000, 6, 10), date(2025, 6, 9)) == 24
        assert anos_de_casamento(date(2000, 6, 10), date(2025, 6, 10)) == 25

    def test_descricao(self):
        assert descricao_bodas(date(2000, 6, 10), date(2025, 6, 10)) == "Bodas de Prata (25 anos)"
        assert descricao_bodas(date(2024, 6, 10), date(2025, 6, 10)) == "Bodas de Papel (1 ano)"
        assert descricao_bodas(date(2000, 6, 10), date(2016, 6, 10)) == "16 anos de casamento"

    def test_descricao_antes_do_primeiro_ano(self):
        assert descricao_bodas(date(2025, 1, 1), date(2025, 6, 1)) is None
        assert descricao_bodas(None) is None


class TestWhatsApp:
    def test_numero_nacional_recebe_ddi(self):
        assert normalizar_telefone_whatsapp("(11) 98765-4321") == "5511987654321"
        assert normalizar_telefone_whatsapp("(11) 3333-4444") == "551133334444"

    def test_numero_com_ddi_fica_como_esta(self):
        assert normalizar_telefone_whatsapp("+55 11 98765-4321") == "5511987654321"

    def test_ddi_configuravel(self):
        assert normalizar_telefone_whatsapp("11987654321", ddi="351") == "35111987654321"

    def test_sem_digitos(self):
        assert normalizar_telefone_whatsapp("") == ""
        assert normalizar_telefone_whatsapp(None) == ""

    def test_personalizar_mensagem_troca_todas_as_ocorrencias(self):
        texto = personalizar_mensagem("Olá, {nome}! {nome}, paz e bem!", "Maria da Silva")
        assert texto == "Olá, Maria! Maria, paz e bem!"

    def test_link_codifica_mensagem(self):
        link = montar_link_whatsapp("5511987654321", "Olá, Maria!\n\n")
        assert link == "https://wa.me/5511987654321?text=Ol%C3%A1%2C%20Maria%21%0A%0A"


def test_slug_arquivo():
    assert slug_arquivo("Maria da Silva") == "maria_da_silva"
    assert slug_arquivo("José") == "jos_"
    assert slug_arquivo("") == "agente"


def test_porcentagem():
    assert porcentagem(1, 3) == 33.3
    assert porcentagem(5, 0) == 0
