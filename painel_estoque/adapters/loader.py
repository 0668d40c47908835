# painel_estoque/adapters/loader.py
"""
Loader de planilhas (XLSX/CSV) de PRODUTOS.

Essas funções:
- leem planilhas usando pandas;
- normalizam cabeçalhos (acentos, variações, sinônimos);
- retornam listas de dicionários com as chaves esperadas pela camada infra.

Observações:
- Células vazias viram ``None`` (o campo fica ausente no armazenamento).
- Quantidades são convertidas com ``domain.policies.quantidade``.
- O status é normalizado para a chave sem acento ("Crítico" → "critico").
- Sem coluna de id, o código do produto é usado como id.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
import re

import pandas as pd

from painel_estoque.domain.policies import quantidade


# ---------------------------
# utilitários de normalização
# ---------------------------

def _slug(s: str) -> str:
    """Normaliza cabeçalhos: minúsculas, sem acentos, sem não-alfanumérico."""
    if s is None:
        return ""
    s = str(s).strip().lower()
    # remove acentos básicos
    acentos = dict(zip("áàâãäéèêëíìîïóòôõöúùûüç", "aaaaaeeeeiiiiooooouuuuc"))
    s = "".join(acentos.get(ch, ch) for ch in s)
    # troca não alfanum por espaço
    s = re.sub(r"[^a-z0-9]+", " ", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s


def _safe_get(row, key):
    """Lê um valor da linha do pandas, tratando NA."""
    val = row.get(key)
    if val is None or pd.isna(val):
        return None
    s = str(val).strip()
    return s or None


def _to_num(val: Any) -> Optional[Any]:
    if val is None:
        return None
    return quantidade(val)


def _to_float(val: Any) -> Optional[float]:
    if val is None:
        return None
    return float(quantidade(val))


def _to_status(val: Any) -> Optional[str]:
    if val is None:
        return None
    # "Crítico" → "critico", "Atenção" → "atencao"
    return _slug(val).replace(" ", "_") or None


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Renomeia colunas com base em sinônimos/variações."""
    aliases = {
        "id": "id",
        "identificador": "id",

        "codigo": "codigo",
        "cod": "codigo",
        "sku": "codigo",

        "descricao": "descricao",
        "produto": "descricao",
        "nome": "descricao",
        "nome do produto": "descricao",

        "disponivel": "disponivel",
        "qtd disponivel": "disponivel",
        "quantidade disponivel": "disponivel",

        "a caminho": "a_caminho",
        "em transito": "a_caminho",
        "transito": "a_caminho",

        "estoque total": "estoque_total",
        "total": "estoque_total",
        "estoque": "estoque_total",

        "nivel minimo": "nivel_minimo",
        "minimo": "nivel_minimo",
        "estoque minimo": "nivel_minimo",

        "status": "status",
        "situacao": "status",
    }

    new_cols = {}
    for col in df.columns:
        key = _slug(col)
        new_cols[col] = aliases.get(key, key.replace(" ", "_"))
    return df.rename(columns=new_cols)


def _read(path: str) -> pd.DataFrame:
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        # separador detectado automaticamente (',' ou ';')
        return pd.read_csv(path, dtype="string", sep=None, engine="python")
    if suffix in (".xlsx", ".xls"):
        return pd.read_excel(path, dtype="string")
    raise ValueError(f"Formato de arquivo não suportado: {suffix or path}")


# ---------------------------
# loader público
# ---------------------------

def load_produtos(path: str) -> List[Dict[str, Any]]:
    """Lê uma planilha de PRODUTOS e retorna registros compatíveis com a tabela `produtos`.

    Campos de saída (chaves do dict por linha):
      - id: str (cai para o código quando a coluna não existe)
      - codigo: str | None
      - descricao: str | None
      - disponivel, a_caminho, estoque_total: int | float | None
      - nivel_minimo: float | None
      - status: 'critico' | 'baixo' | 'atencao' | 'ok' | outro | None

    Linhas sem id e sem código são ignoradas.
    """
    df = _normalize_columns(_read(path))
    out: List[Dict[str, Any]] = []
    for _, row in df.iterrows():
        codigo = _safe_get(row, "codigo")
        pid = _safe_get(row, "id") or codigo
        if pid is None:
            continue
        out.append(
            {
                "id": pid,
                "codigo": codigo,
                "descricao": _safe_get(row, "descricao"),
                "disponivel": _to_num(_safe_get(row, "disponivel")),
                "a_caminho": _to_num(_safe_get(row, "a_caminho")),
                "estoque_total": _to_num(_safe_get(row, "estoque_total")),
                "nivel_minimo": _to_float(_safe_get(row, "nivel_minimo")),
                "status": _to_status(_safe_get(row, "status")),
            }
        )
    return out
