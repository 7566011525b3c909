"""Erros canônicos do domínio de metadados (SheetBind).

Declarações de colunas e registro de entidades são decisões de programação,
não dados. Falhas aqui são fatais e ocorrem no momento da declaração/scan.
"""


class MetadataError(Exception):
    """Erro base do domínio de metadados."""


class InvalidColumnDeclarationError(MetadataError, ValueError):
    """Declaração de coluna inválida (header vazio, value kind desconhecido)."""


class DuplicateEntityError(MetadataError, ValueError):
    """Entidade já registrada com um descriptor diferente."""
