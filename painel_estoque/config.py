# painel_estoque/config.py
"""
Configurações globais e valores padrão do painel de estoque.
"""

import os
from dataclasses import dataclass


# Caminho padrão do banco de dados SQLite
DB_PATH = os.environ.get("PAINEL_ESTOQUE_DB") or os.path.join(os.getcwd(), "painel_estoque.db")


@dataclass
class DefaultConfig:
    """Valores padrão para a análise e exibição do estoque."""
    limite_ranking: int = 10       # itens no ranking de menor estoque
    limite_rotulo: int = 20        # caracteres do rótulo no gráfico de barras
    reticencias: str = "..."
    limite_destaques: int = 5      # itens exibidos nas listas de críticos/baixo estoque
    cor_status_desconhecido: str = "#6b7280"


# Instância global dos valores padrão
DEFAULTS = DefaultConfig()
