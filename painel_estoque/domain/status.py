"""
Tabela de descritores de status do estoque.

O status de cada produto é calculado fora deste sistema e chega como campo
de entrada. Aqui ficam apenas os metadados de apresentação (rótulo, cor do
gráfico, estilo no terminal e ícone) usados pelos relatórios.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from painel_estoque.config import DEFAULTS


STATUS_PADRAO = "ok"
FILTRO_TODOS = "todos"


@dataclass(frozen=True)
class StatusDescriptor:
    label: str
    color: str
    estilo: str  # estilo Rich
    icone: str


STATUS_CONFIG: Mapping[str, StatusDescriptor] = MappingProxyType({
    "critico": StatusDescriptor(label="Crítico", color="#ef4444", estilo="bold red", icone="⚠"),
    "baixo": StatusDescriptor(label="Baixo", color="#f97316", estilo="bold dark_orange", icone="↗"),
    "atencao": StatusDescriptor(label="Atenção", color="#eab308", estilo="bold yellow", icone="■"),
    "ok": StatusDescriptor(label="Ok", color="#22c55e", estilo="bold green", icone="✓"),
})


def normaliza_status(status: Optional[str]) -> str:
    """Status ausente ou vazio conta como ``'ok'``."""
    if status is None:
        return STATUS_PADRAO
    s = str(status)
    return s if s else STATUS_PADRAO


def label_status(status: str) -> str:
    desc = STATUS_CONFIG.get(status)
    return desc.label if desc else status


def cor_status(status: str) -> str:
    desc = STATUS_CONFIG.get(status)
    return desc.color if desc else DEFAULTS.cor_status_desconhecido
