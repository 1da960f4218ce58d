import random
from datetime import date, timedelta

from django.core.management.base import BaseCommand

from agentes_app.models import (
    Agente,
    ESTADO_CIVIL_CASADO,
    ESTADO_CIVIL_CHOICES,
    FUNCAO_AGENTE,
    FUNCAO_COORDENADOR,
    SETOR_CHOICES,
    SETOR_COORDENADOR,
)
from agentes_app.utils import formatar_telefone


NOMES_M = [
    "João", "Pedro", "Lucas", "Carlos", "José", "Miguel", "Rafael", "André", "Daniel", "Manoel",
    "Francisco", "Antônio", "Paulo", "Marcos", "Tiago", "Samuel", "Gabriel", "Ricardo",
]
NOMES_F = [
    "Maria", "Ana", "Carmem", "Luísa", "Patrícia", "Rosa", "Cláudia", "Laura", "Andréa",
    "Fernanda", "Juliana", "Paula", "Karina", "Marisa", "Helena", "Beatriz", "Teresa",
]
SOBRENOMES = [
    "Silva", "Santos", "Oliveira", "Souza", "Rodrigues", "Ferreira", "Alves", "Pereira",
    "Lima", "Gomes", "Costa", "Ribeiro", "Martins", "Carvalho", "Almeida", "Nascimento",
]
COMUNIDADES = [
    "Matriz", "São José", "Nossa Senhora Aparecida", "Santa Rita", "São Francisco", "Sagrada Família",
]
CIDADES = [("São Paulo", "SP"), ("Campinas", "SP"), ("Belo Horizonte", "MG"), ("Curitiba", "PR")]
VEICULOS = ["Gol", "Onix", "HB20", "Uno", "Corolla", "Fiesta"]

DDDS = ["11", "19", "31", "41"]


def _telefone_aleatorio():
    return formatar_telefone(random.choice(DDDS) + "9" + str(random.randint(10000000, 99999999)))


def _login_livre(nome, sobrenome):
    base = f"{nome}.{sobrenome}".upper()
    login = base
    n = 1
    while Agente.objects.filter(login=login).exists():
        n += 1
        login = f"{base}{n}"
    return login


class Command(BaseCommand):
    help = "Cria agentes de teste aleatórios e um coordenador."

    def add_arguments(self, parser):
        parser.add_argument("--total", type=int, default=30, help="Quantidade de agentes a criar")
        parser.add_argument("--paroquia", default="Paróquia São José", help="Paróquia dos agentes")

    def handle(self, *args, **options):
        total = options["total"]
        paroquia = options["paroquia"]
        hoje = date.today()

        estados = [valor for valor, _ in ESTADO_CIVIL_CHOICES]
        setores = [valor for valor, _ in SETOR_CHOICES if valor != SETOR_COORDENADOR]

        coordenador, criado = Agente.objects.get_or_create(
            login="COORDENADOR",
            defaults={
                "nome_completo": "Coordenação Paroquial",
                "data_nascimento": date(1970, 1, 1),
                "estado_civil": ESTADO_CIVIL_CASADO,
                "telefone": _telefone_aleatorio(),
                "setor": SETOR_COORDENADOR,
                "funcao": FUNCAO_COORDENADOR,
                "paroquia": paroquia,
                "comunidade": "Matriz",
            },
        )
        if criado:
            self.stdout.write(self.style.SUCCESS("Coordenador criado: login COORDENADOR, nascimento 01/01/1970"))

        criados = 0
        for _ in range(total):
            nome = random.choice(NOMES_M + NOMES_F)
            sobrenome = random.choice(SOBRENOMES)
            idade = random.randint(20, 80)
            estado_civil = random.choice(estados)
            cidade, uf = random.choice(CIDADES)
            possui_veiculo = random.random() < 0.4

            agente = Agente(
                login=_login_livre(nome, sobrenome),
                nome_completo=f"{nome} {random.choice(SOBRENOMES)} {sobrenome}",
                data_nascimento=hoje - timedelta(days=idade * 365 + random.randint(0, 364)),
                estado_civil=estado_civil,
                telefone=_telefone_aleatorio(),
                email=f"{nome.lower()}.{sobrenome.lower()}{random.randint(1, 999)}@exemplo.com",
                cidade=cidade,
                uf=uf,
                possui_veiculo=possui_veiculo,
                modelo_veiculo=random.choice(VEICULOS) if possui_veiculo else "",
                paroquia=paroquia,
                comunidade=random.choice(COMUNIDADES),
                setor=random.choice(setores),
                funcao=FUNCAO_AGENTE,
                data_ingresso=hoje - timedelta(days=random.randint(30, 3650)),
            )

            if estado_civil == ESTADO_CIVIL_CASADO:
                agente.nome_conjuge = f"{random.choice(NOMES_M + NOMES_F)} {sobrenome}"
                anos = random.randint(1, max(1, idade - 19))
                agente.data_casamento = hoje - timedelta(days=anos * 365 + random.randint(0, 364))

            agente.save()
            criados += 1

        self.stdout.write(self.style.SUCCESS(f"{criados} agentes criados."))
