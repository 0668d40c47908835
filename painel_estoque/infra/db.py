# painel_estoque/infra/db.py
"""
Conexão com o banco SQLite do painel.

O banco guarda a tabela `produtos` (ver `infra/migrations.py`), lida pela
listagem e pela análise e escrita pela importação de planilhas e pela
configuração do nível mínimo.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def connect(db_path: str) -> Iterator[sqlite3.Connection]:
    """
    Context manager para abrir conexão SQLite com:
    - row_factory = sqlite3.Row
    - commit ao sair (rollback em caso de exceção)
    """
    conn = sqlite3.connect(str(db_path))
    try:
        conn.row_factory = sqlite3.Row
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
