"""
Initial data for a fresh database.

Runs only while the policy table is empty, so it is safe to call on every
start: once any policy exists the seed is skipped.
"""
from datetime import timedelta
import logging

from django.conf import settings
from django.db import connections, transaction
from django.utils import timezone

from logs_acesso.models import LogAcesso
from permissoes.models import Permissao
from trilhas_auditoria.models import TrilhaAuditoria
from .models import Politica

logger = logging.getLogger(__name__)


POLITICAS = [
    {
        'nome': 'Política de Senhas',
        'descricao': 'Senhas devem ter no mínimo 12 caracteres e ser trocadas a cada 90 dias.',
        'categoria': 'Segurança da Informação',
    },
    {
        'nome': 'Política de Controle de Acesso',
        'descricao': 'O acesso aos sistemas é concedido pelo princípio do menor privilégio.',
        'categoria': 'Segurança da Informação',
    },
    {
        'nome': 'Política de Retenção de Logs',
        'descricao': 'Logs de acesso e trilhas de auditoria são mantidos por no mínimo 5 anos.',
        'categoria': 'Auditoria',
    },
    {
        'nome': 'Política de Segregação de Funções',
        'descricao': 'Quem aprova um pagamento não pode ser quem o registra.',
        'categoria': 'Financeiro',
    },
]

PERMISSOES = [
    {'nome': 'Visualizar Relatórios', 'descricao': 'Consulta de relatórios gerenciais.', 'modulo': 'Relatórios'},
    {'nome': 'Gerenciar Usuários', 'descricao': 'Criação e exclusão de usuários.', 'modulo': 'Administração'},
    {'nome': 'Aprovar Pagamentos', 'descricao': 'Aprovação de pagamentos a fornecedores.', 'modulo': 'Financeiro'},
    {'nome': 'Consultar Auditoria', 'descricao': 'Leitura de logs e trilhas de auditoria.', 'modulo': 'Auditoria'},
]

LOGS_ACESSO = [
    {'usuario': 'admin', 'acao': 'LOGIN', 'recurso': '/sistema', 'endereco_ip': '192.168.0.10'},
    {'usuario': 'maria.silva', 'acao': 'CONSULTA', 'recurso': '/relatorios/financeiro', 'endereco_ip': '192.168.0.23'},
    {'usuario': 'joao.souza', 'acao': 'LOGIN', 'recurso': '/sistema', 'endereco_ip': '192.168.0.41', 'sucesso': False},
]

TRILHAS_AUDITORIA = [
    {'usuario': 'admin', 'acao': 'CRIACAO', 'entidade': 'Politica', 'registro_id': 1,
     'detalhes': 'Política de Senhas cadastrada.'},
    {'usuario': 'admin', 'acao': 'CRIACAO', 'entidade': 'Permissao', 'registro_id': 2,
     'detalhes': 'Permissão Gerenciar Usuários cadastrada.'},
    {'usuario': 'maria.silva', 'acao': 'EXCLUSAO', 'entidade': 'LogAcesso', 'registro_id': 7,
     'detalhes': 'Log de acesso duplicado removido.'},
]


def seed_initial_data():
    """
    Populate all four tables when there are no policies yet.

    Returns:
        True if rows were inserted, False if the seed was skipped
    """
    if Politica.objects.exists():
        logger.info("Policies already present, skipping seed")
        return False

    now = timezone.now()

    with transaction.atomic():
        Politica.objects.bulk_create([
            Politica(data_criacao=now, **data) for data in POLITICAS
        ])
        Permissao.objects.bulk_create([
            Permissao(**data) for data in PERMISSOES
        ])
        # Spread the entries out so the newest-first ordering is visible
        LogAcesso.objects.bulk_create([
            LogAcesso(data_hora=now - timedelta(hours=i), **data)
            for i, data in enumerate(LOGS_ACESSO)
        ])
        TrilhaAuditoria.objects.bulk_create([
            TrilhaAuditoria(data_hora=now - timedelta(hours=i), **data)
            for i, data in enumerate(TRILHAS_AUDITORIA)
        ])

    logger.info(
        f"Seeded {len(POLITICAS)} policies, {len(PERMISSOES)} permissions, "
        f"{len(LOGS_ACESSO)} access logs, {len(TRILHAS_AUDITORIA)} audit trails"
    )
    return True


def seed_on_migrate(sender, **kwargs):
    """
    post_migrate receiver: seed once the schema exists, before the server
    takes traffic. Disabled with SEED_ON_STARTUP = False.
    """
    if not getattr(settings, 'SEED_ON_STARTUP', True):
        return

    # A partial migrate (e.g. `migrate politicas`) can leave the other tables missing
    using = kwargs.get('using', 'default')
    tables = connections[using].introspection.table_names()
    required = [model._meta.db_table for model in (Politica, Permissao, LogAcesso, TrilhaAuditoria)]
    if not all(table in tables for table in required):
        return

    seed_initial_data()
