"""
Migrações de schema usando PRAGMA user_version.

V1: tabela de produtos
V2: índices para filtros por status e busca por código
"""

from __future__ import annotations

from typing import List
from .db import connect


SCHEMA_V1: List[str] = [
    # Produtos (espelho da coleção "produtos" do armazenamento externo)
    """
    CREATE TABLE IF NOT EXISTS produtos (
        id TEXT PRIMARY KEY,
        codigo TEXT,
        descricao TEXT,
        disponivel INTEGER,
        a_caminho INTEGER,
        estoque_total INTEGER,
        nivel_minimo REAL,
        status TEXT -- 'critico' | 'baixo' | 'atencao' | 'ok'
    );
    """,
]

SCHEMA_V2: List[str] = [
    "CREATE INDEX IF NOT EXISTS idx_produtos_status ON produtos(status);",
    "CREATE INDEX IF NOT EXISTS idx_produtos_codigo ON produtos(codigo);",
]


def _apply(conn, scripts: List[str]) -> None:
    for sql in scripts:
        conn.executescript(sql)


def apply_migrations(db_path: str) -> None:
    """Aplica migrações incrementais de acordo com PRAGMA user_version."""
    with connect(db_path) as conn:
        ver = conn.execute("PRAGMA user_version;").fetchone()[0] or 0

        if ver < 1:
            _apply(conn, SCHEMA_V1)
            conn.execute("PRAGMA user_version = 1;")
            ver = 1

        if ver < 2:
            _apply(conn, SCHEMA_V2)
            conn.execute("PRAGMA user_version = 2;")
            ver = 2
