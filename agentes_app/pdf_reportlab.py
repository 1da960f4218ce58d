# agentes_app/pdf_reportlab.py

from io import BytesIO
from datetime import datetime
import logging

from reportlab.graphics.charts.barcharts import VerticalBarChart
from reportlab.graphics.charts.piecharts import Pie
from reportlab.graphics.shapes import Drawing, String
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm, mm
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas as rl_canvas
from reportlab.platypus import (
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from .utils import formatar_data_br

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# MEDIDAS DA FICHA (mm, contadas a partir do topo da página)
# ═══════════════════════════════════════════════════════════════════════════════

MARGEM = 15
TAMANHO_LOGO = 20
TAMANHO_FOTO = 40
ALTURA_LINHA = 6
ALTURA_SECAO = 8
LARGURA_ROTULO = 50
MARGEM_INFERIOR = 20
TOPO_NOVA_PAGINA = 20

FONTE_NORMAL = 10
FONTE_TITULO = 16
FONTE_SECAO = 12

AZUL_SECAO = colors.Color(37 / 255, 99 / 255, 235 / 255)
CINZA_LINHA = colors.Color(150 / 255, 150 / 255, 150 / 255)

CORES_GRAFICO = [
    colors.HexColor("#0088FE"),
    colors.HexColor("#00C49F"),
    colors.HexColor("#FFBB28"),
    colors.HexColor("#FF8042"),
    colors.HexColor("#AF19FF"),
]


def _sim_nao(valor):
    return "Sim" if bool(valor) else "Não"


def carregar_logo(origem):
    """
    Carrega o logo (caminho local ou URL). Devolve None se não for possível;
    a ficha sai sem logo nesse caso.
    """
    if not origem:
        return None
    try:
        logo = ImageReader(origem)
        logo.getSize()
    except Exception:
        logger.warning("Não foi possível carregar o logo dos relatórios: %s", origem)
        return None
    return logo


def _carregar_foto(agente):
    """
    ImageReader da foto do agente, None se não houver foto.
    Levanta ValueError se a foto existir mas não puder ser lida.
    """
    if not agente.foto:
        return None
    try:
        with agente.foto.open("rb") as f:
            foto = ImageReader(BytesIO(f.read()))
        foto.getSize()
    except Exception as e:
        raise ValueError(f"Foto inválida para o agente {agente.pk}") from e
    return foto


# ═══════════════════════════════════════════════════════════════════════════════
# FICHA CADASTRAL
# ═══════════════════════════════════════════════════════════════════════════════

class _Ficha:
    """Desenha uma ficha cadastral no canvas, controlando a posição vertical."""

    def __init__(self, c, logo, subtitulo):
        self.c = c
        self.logo = logo
        self.subtitulo = subtitulo
        self.largura, self.altura = A4
        self.largura_mm = self.largura / mm
        self.altura_mm = self.altura / mm
        self.y = 0

    def _py(self, y_mm):
        """Converte 'mm a partir do topo' para pontos do ReportLab."""
        return self.altura - y_mm * mm

    def nova_pagina(self):
        self._rodape()
        self.c.showPage()
        self.y = TOPO_NOVA_PAGINA

    def _rodape(self):
        c = self.c
        c.saveState()
        c.setFont("Helvetica", 8)
        c.setFillColor(colors.HexColor("#666666"))
        c.drawRightString(self.largura - 1.2 * cm, 0.8 * cm, f"Página {c.getPageNumber()}")
        c.restoreState()

    def _cabe(self, altura_mm):
        return self.y + altura_mm <= self.altura_mm - MARGEM_INFERIOR

    # ---------------------------------------------------------------------------

    def cabecalho(self):
        c = self.c
        if self.logo is not None:
            c.drawImage(
                self.logo,
                MARGEM * mm,
                self._py(15 + TAMANHO_LOGO),
                TAMANHO_LOGO * mm,
                TAMANHO_LOGO * mm,
                preserveAspectRatio=True,
                mask="auto",
            )

        c.setFillColor(colors.black)
        c.setFont("Helvetica-Bold", FONTE_TITULO)
        c.drawString((MARGEM + 25) * mm, self._py(22), "Ficha Cadastral de Agente")

        c.setFont("Helvetica", FONTE_NORMAL)
        c.drawString((MARGEM + 25) * mm, self._py(30), self.subtitulo)

        c.setStrokeColor(CINZA_LINHA)
        c.line(MARGEM * mm, self._py(35), (self.largura_mm - MARGEM) * mm, self._py(35))

    def foto(self, agente):
        c = self.c
        x, y = MARGEM, 45

        c.setStrokeColor(CINZA_LINHA)
        c.rect(x * mm, self._py(y + TAMANHO_FOTO), TAMANHO_FOTO * mm, TAMANHO_FOTO * mm)

        centro_x = (x + TAMANHO_FOTO / 2) * mm
        centro_y = y + TAMANHO_FOTO / 2
        c.setFillColor(colors.black)
        c.setFont("Helvetica", 8)

        try:
            imagem = _carregar_foto(agente)
        except ValueError:
            logger.warning("Foto do agente %s não pôde ser lida", agente.pk)
            c.drawCentredString(centro_x, self._py(centro_y), "Foto")
            c.drawCentredString(centro_x, self._py(centro_y + 4), "inválida")
            return

        if imagem is None:
            c.drawCentredString(centro_x, self._py(centro_y), "Sem Foto")
            return

        c.drawImage(
            imagem,
            (x + 1) * mm,
            self._py(y + TAMANHO_FOTO - 1),
            (TAMANHO_FOTO - 2) * mm,
            (TAMANHO_FOTO - 2) * mm,
            preserveAspectRatio=True,
            anchor="c",
            mask="auto",
        )

    def dados_ao_lado_da_foto(self, agente):
        x = MARGEM + TAMANHO_FOTO + 10
        y = 45 + 5

        linhas = [
            ("Nome Completo:", agente.nome_completo),
            ("Nascimento:", formatar_data_br(agente.data_nascimento)),
            ("Estado Civil:", agente.estado_civil),
        ]
        if agente.e_casado:
            linhas.append(("Cônjuge:", agente.nome_conjuge))
            linhas.append(("Casamento:", formatar_data_br(agente.data_casamento)))
            linhas.append(("Bodas:", agente.bodas))

        c = self.c
        c.setFillColor(colors.black)
        for rotulo, valor in linhas:
            if not valor:
                continue
            c.setFont("Helvetica-Bold", FONTE_NORMAL)
            c.drawString(x * mm, self._py(y), rotulo)
            c.setFont("Helvetica", FONTE_NORMAL)
            c.drawString((x + 40) * mm, self._py(y), str(valor))
            y += ALTURA_LINHA

    def secao(self, titulo):
        if not self._cabe(ALTURA_SECAO):
            self.nova_pagina()

        c = self.c
        largura = self.largura_mm - MARGEM * 2
        c.setFillColor(AZUL_SECAO)
        c.rect(MARGEM * mm, self._py(self.y + ALTURA_SECAO), largura * mm, ALTURA_SECAO * mm, stroke=0, fill=1)

        c.setFillColor(colors.white)
        c.setFont("Helvetica-Bold", FONTE_SECAO)
        c.drawString((MARGEM + 2) * mm, self._py(self.y + ALTURA_SECAO / 2 + 1.5), titulo)

        self.y += ALTURA_SECAO + 4

    def campo(self, rotulo, valor):
        if valor is None or str(valor).strip() == "":
            return

        x_valor = MARGEM + LARGURA_ROTULO
        largura_valor = (self.largura_mm - x_valor - MARGEM) * mm
        linhas = simpleSplit(str(valor), "Helvetica", FONTE_NORMAL, largura_valor) or [""]
        altura_linha = ALTURA_LINHA - 1

        # Rótulo nunca fica sozinho no fim da página
        if not self._cabe(min(len(linhas), 2) * altura_linha):
            self.nova_pagina()

        c = self.c
        c.setFillColor(colors.black)
        # Texto alinhado pelo topo: a linha de base fica ~3.5 mm abaixo de y
        c.setFont("Helvetica-Bold", FONTE_NORMAL)
        c.drawString(MARGEM * mm, self._py(self.y + 3.5), rotulo)

        c.setFont("Helvetica", FONTE_NORMAL)
        for linha in linhas:
            if not self._cabe(altura_linha):
                self.nova_pagina()
                c.setFillColor(colors.black)
                c.setFont("Helvetica", FONTE_NORMAL)
            c.drawString(x_valor * mm, self._py(self.y + 3.5), linha)
            self.y += altura_linha

        self.y += 3

    # ---------------------------------------------------------------------------

    def desenhar(self, agente):
        self.cabecalho()
        self.foto(agente)
        self.dados_ao_lado_da_foto(agente)

        self.y = 45 + TAMANHO_FOTO + 15

        self.secao("Contato")
        self.campo("Telefone / WhatsApp:", agente.telefone)
        self.campo("E-mail:", agente.email)

        self.secao("Endereço")
        self.campo("CEP:", agente.cep)
        self.campo("Endereço:", agente.logradouro)
        self.campo("Bairro:", agente.bairro)
        if agente.cidade or agente.uf:
            self.campo("Cidade / UF:", f"{agente.cidade} / {agente.uf}")

        self.secao("Informações Pastorais")
        self.campo("Paróquia:", agente.paroquia)
        self.campo("Comunidade:", agente.comunidade)
        self.campo("Setor Pastoral:", agente.setor)
        self.campo("Função:", agente.funcao)
        self.campo("Data de Ingresso:", formatar_data_br(agente.data_ingresso))

        self.secao("Outras Informações")
        self.campo("Possui Veículo:", _sim_nao(agente.possui_veiculo))
        if agente.possui_veiculo:
            self.campo("Modelo do Veículo:", agente.modelo_veiculo)
        self.campo("Observações:", agente.observacoes)


def gerar_pdf_fichas(agentes, logo=None, subtitulo="Pastoral Familiar - Cadastro Paroquial"):
    """
    Gera um PDF (bytes) com uma ficha cadastral por agente.
    Cada ficha começa numa página nova e continua em outra se passar da margem.
    """
    buffer = BytesIO()
    c = rl_canvas.Canvas(buffer, pagesize=A4)
    c.setTitle("Fichas Cadastrais")
    c.setAuthor("Pastoral Familiar")

    ficha = _Ficha(c, logo, subtitulo)
    for i, agente in enumerate(agentes):
        if i > 0:
            ficha.nova_pagina()
        ficha.desenhar(agente)

    ficha._rodape()
    c.save()

    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


# ═══════════════════════════════════════════════════════════════════════════════
# RELATÓRIO COM GRÁFICOS
# ═══════════════════════════════════════════════════════════════════════════════

def _grafico_pizza(dados, largura, altura=8 * cm):
    """dados: lista de (nome, quantidade)."""
    d = Drawing(largura, altura)
    total = sum(qtd for _, qtd in dados)

    pizza = Pie()
    pizza.width = pizza.height = altura - 2 * cm
    pizza.x = (largura - pizza.width) / 2
    pizza.y = 1 * cm
    pizza.data = [qtd for _, qtd in dados]
    pizza.labels = [f"{nome} {round(qtd * 100 / total)}%" for nome, qtd in dados]
    pizza.sideLabels = True
    pizza.simpleLabels = False
    pizza.slices.strokeColor = colors.white
    pizza.slices.fontSize = 8

    for i in range(len(dados)):
        pizza.slices[i].fillColor = CORES_GRAFICO[i % len(CORES_GRAFICO)]

    d.add(pizza)
    return d


def _grafico_barras(dados, largura, altura=9 * cm):
    d = Drawing(largura, altura)

    barras = VerticalBarChart()
    barras.x = 1.2 * cm
    barras.y = 2.5 * cm
    barras.width = largura - 2 * cm
    barras.height = altura - 3.5 * cm
    barras.data = [[qtd for _, qtd in dados]]
    barras.bars[0].fillColor = colors.HexColor("#82ca9d")
    barras.valueAxis.valueMin = 0
    barras.valueAxis.valueStep = max(1, max(qtd for _, qtd in dados) // 5)
    barras.categoryAxis.categoryNames = [nome for nome, _ in dados]
    barras.categoryAxis.labels.angle = 30
    barras.categoryAxis.labels.boxAnchor = "ne"
    barras.categoryAxis.labels.fontSize = 8

    d.add(barras)
    d.add(String(largura / 2, altura - 0.5 * cm, "Nº de Agentes", textAnchor="middle", fontSize=9))
    return d


def gerar_pdf_relatorio(estatisticas, logo=None, titulo="Relatório da Pastoral Familiar"):
    """
    PDF do relatório: página 1 com os totais e o gráfico por estado civil,
    página 2 com o gráfico por setor.
    """
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=MARGEM * mm,
        rightMargin=MARGEM * mm,
        topMargin=MARGEM * mm,
        bottomMargin=MARGEM * mm,
        title=titulo,
        author="Pastoral Familiar",
    )

    styles = getSampleStyleSheet()
    style_h = styles["Heading1"]
    style_h2 = styles["Heading2"]
    style_n = styles["Normal"]

    largura_util = A4[0] - 2 * MARGEM * mm
    story = []

    story.append(Paragraph(titulo, style_h))

    gerado_em = datetime.now().strftime("%d/%m/%Y %H:%M")
    story.append(Paragraph(f"Gerado: {gerado_em}", style_n))
    story.append(Spacer(1, 10))

    resumo = Table(
        [
            ["Total de Agentes", "Setores Ativos", "Média por Setor"],
            [
                str(estatisticas["total"]),
                str(estatisticas["total_setores"]),
                f"{estatisticas['media_por_setor']:.1f}",
            ],
        ],
        colWidths=[largura_util / 3] * 3,
    )
    resumo.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 9),
        ("FONTSIZE", (0, 1), (-1, 1), 16),
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#F2F2F2")),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.HexColor("#DDDDDD")),
        ("TOPPADDING", (0, 1), (-1, 1), 6),
        ("BOTTOMPADDING", (0, 1), (-1, 1), 8),
    ]))
    story.append(resumo)
    story.append(Spacer(1, 16))

    # Página 1: estado civil
    story.append(Paragraph("Distribuição por Estado Civil", style_h2))
    por_estado = [(n, q) for n, q in estatisticas["por_estado_civil"] if q]
    if por_estado:
        story.append(_grafico_pizza(por_estado, largura_util))
    else:
        story.append(Paragraph("Sem dados", style_n))

    # Página 2: setor
    story.append(PageBreak())
    story.append(Paragraph("Agentes por Setor", style_h2))
    por_setor = [(n, q) for n, q in estatisticas["por_setor"] if q]
    if por_setor:
        story.append(_grafico_barras(por_setor, largura_util))
    else:
        story.append(Paragraph("Sem dados", style_n))

    def _on_page(canvas, _doc):
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(colors.HexColor("#666666"))
        canvas.drawRightString(A4[0] - 1.2 * cm, 0.8 * cm, f"Página {_doc.page}")
        canvas.restoreState()

    def _primeira_pagina(canvas, _doc):
        if logo is not None:
            lado = TAMANHO_LOGO * mm
            canvas.drawImage(
                logo,
                A4[0] - MARGEM * mm - lado,
                A4[1] - MARGEM * mm - lado,
                lado,
                lado,
                preserveAspectRatio=True,
                mask="auto",
            )
        _on_page(canvas, _doc)

    doc.build(story, onFirstPage=_primeira_pagina, onLaterPages=_on_page)

    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes

