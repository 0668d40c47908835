# painel_estoque/usecases/importar_produtos.py
"""
UC: importar PRODUTOS de uma planilha (XLSX/CSV) para o banco.
"""
from __future__ import annotations

from typing import Any, Dict, List

from painel_estoque.config import DB_PATH
from painel_estoque.adapters.loader import load_produtos
from painel_estoque.infra.migrations import apply_migrations
from painel_estoque.infra.repositories import ProdutoRepo
from painel_estoque.infra.logger import (
    log_transaction, log_database_operation, log_system_event,
    log_file_operation, print_system
)


def run_importar(path: str, db_path: str = DB_PATH) -> Dict[str, Any]:
    """Lê a planilha e grava (upsert) todas as linhas na tabela `produtos`."""
    log_system_event("importar_start", {"file_path": path})
    log_file_operation("import", path)

    try:
        apply_migrations(db_path)
        rows: List[Dict[str, Any]] = load_produtos(path)
        log_file_operation("import", path, rows_processed=len(rows))

        inseridas = ProdutoRepo(db_path).upsert(rows)
        log_database_operation("produtos", "UPSERT_MANY", inseridas, file_path=path)
        print_system(f">> {inseridas} produtos importados de {path}")

        result = {"arquivo": path, "linhas_inseridas": inseridas}

        log_transaction("importar", {"file": path, "rows_count": len(rows)}, result=result)
        log_system_event("importar_success", {"file_path": path, "rows_inserted": inseridas})

        return result

    except Exception as e:
        error_msg = str(e)
        log_transaction("importar", {"file": path}, error=error_msg)
        log_system_event("importar_error", {"file_path": path, "error": error_msg}, level="error")
        raise
