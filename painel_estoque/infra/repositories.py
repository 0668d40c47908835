# painel_estoque/infra/repositories.py
"""
Repositórios (DAO) para acesso e manipulação de dados no SQLite.

Classes:
- ProdutoRepo

O repositório expõe as operações que o painel consome do armazenamento:
listar todos os produtos e atualizar um único campo de um produto. O
``upsert`` é usado pela importação de planilhas.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .db import connect
from painel_estoque.domain.models import as_dict


COLUNAS = (
    "id", "codigo", "descricao", "disponivel", "a_caminho",
    "estoque_total", "nivel_minimo", "status",
)

# Campos que podem ser alterados individualmente pelo painel
CAMPOS_EDITAVEIS = frozenset({"nivel_minimo"})


def _payload(row: Any) -> Dict[str, Any]:
    r = as_dict(row)
    out = {k: r.get(k) for k in COLUNAS}
    if out["id"] is None:
        raise ValueError("produto sem id")
    out["id"] = str(out["id"])
    if out["codigo"] is not None:
        out["codigo"] = str(out["codigo"])
    return out


class ProdutoRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def upsert(self, rows: Iterable[Any]) -> int:
        payloads = [_payload(r) for r in rows]
        if not payloads:
            return 0
        with connect(self.db_path) as c:
            c.executemany(
                """
                INSERT INTO produtos
                    (id, codigo, descricao, disponivel, a_caminho,
                     estoque_total, nivel_minimo, status)
                VALUES
                    (:id, :codigo, :descricao, :disponivel, :a_caminho,
                     :estoque_total, :nivel_minimo, :status)
                ON CONFLICT(id) DO UPDATE SET
                    codigo=excluded.codigo,
                    descricao=excluded.descricao,
                    disponivel=excluded.disponivel,
                    a_caminho=excluded.a_caminho,
                    estoque_total=excluded.estoque_total,
                    nivel_minimo=excluded.nivel_minimo,
                    status=excluded.status
                """,
                payloads,
            )
        return len(payloads)

    def get_all(self) -> List[Dict[str, Any]]:
        with connect(self.db_path) as c:
            cur = c.execute(
                """SELECT id, codigo, descricao, disponivel, a_caminho,
                          estoque_total, nivel_minimo, status
                   FROM produtos
                   ORDER BY rowid"""
            )
            cols = [d[0] for d in cur.description]
            return [dict(zip(cols, row)) for row in cur.fetchall()]

    def get(self, produto_id: str) -> Optional[Dict[str, Any]]:
        with connect(self.db_path) as c:
            cur = c.execute(
                """SELECT id, codigo, descricao, disponivel, a_caminho,
                          estoque_total, nivel_minimo, status
                   FROM produtos
                   WHERE id = ?""",
                (str(produto_id),),
            )
            row = cur.fetchone()
            if row is None:
                return None
            cols = [d[0] for d in cur.description]
            return dict(zip(cols, row))

    def update_field(self, produto_id: str, campo: str, valor: Any) -> None:
        """Atualiza um único campo de um produto.

        Raises:
            ValueError: se o campo não for editável.
            KeyError: se o produto não existir.
        """
        if campo not in CAMPOS_EDITAVEIS:
            raise ValueError(f"campo não editável: {campo}")
        with connect(self.db_path) as c:
            # nome da coluna vem da whitelist acima
            cur = c.execute(
                f"UPDATE produtos SET {campo} = ? WHERE id = ?",
                (valor, str(produto_id)),
            )
            if cur.rowcount == 0:
                raise KeyError(produto_id)
