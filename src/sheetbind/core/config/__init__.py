# src/sheetbind/core/config/__init__.py

"""
Camada de configuração do SheetBind.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução da configuração final via deep-merge determinístico
    - Geração de hash canônico para rastreabilidade

Limites explícitos:
    - Não valida semântica de entidades
    - Não interage com o codec diretamente (o codec lê `CodecOptions`)
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash  # noqa: F401
from .loader import DEFAULT_CONFIG, load_config, resolve_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
