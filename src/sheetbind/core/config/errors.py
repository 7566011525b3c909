# src/sheetbind/core/config/errors.py
"""
Exceções canônicas da camada de configuração do SheetBind.

Este módulo define a hierarquia de exceções levantadas durante o
carregamento, a validação estrutural e a resolução da configuração
que governa o codec e o alinhamento de cabeçalhos.

Diferente dos erros de dados (que são sempre reportados, nunca
levantados), erros de configuração são falhas de montagem do ambiente
e interrompem a inicialização imediatamente.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa erro de dado de planilha

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do codec, do registry ou do mapper
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do SheetBind.

    Permite captura genérica de falhas de configuração, distinta de
    erros de declaração de entidades ou de schema.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    O arquivo de defaults é obrigatório; sem ele não existe
    configuração efetiva válida.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato do arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Conteúdo raiz da configuração não é um dicionário (`dict`).

    Listas ou valores escalares no root são rejeitados sem tentativa
    de normalização.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"codec": {"key_column": 0}}
        - override: {"codec": "strict"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidConfigValueError(ConfigError):
    """
    Valor de uma chave reconhecida possui tipo ou domínio inválido.

    Exemplo: `codec.key_column` negativo ou não inteiro.
    """
