"""
Application-wide constants.
"""


# URL names of the record store resources, as exposed under /api/
class Resource:
    LOGS_ACESSO = 'logsacesso'
    PERMISSOES = 'permissoes'
    POLITICAS = 'politicas'
    TRILHAS_AUDITORIA = 'trilhasauditoria'

    ALL = [LOGS_ACESSO, PERMISSOES, POLITICAS, TRILHAS_AUDITORIA]


# Field length limits shared by the record models
class FieldLength:
    USUARIO = 150
    ACAO = 100
    NOME = 200
    RECURSO = 255
    CATEGORIA = 100
    MODULO = 100
    ENTIDADE = 100


# Error message prefix for internal failures
INTERNAL_ERROR_PREFIX = 'Erro interno do servidor'
