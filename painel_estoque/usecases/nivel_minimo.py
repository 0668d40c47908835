# painel_estoque/usecases/nivel_minimo.py
"""
UC: configurar o nível mínimo de estoque de um produto.

- parse_nivel_minimo(valor): valida o valor digitado (texto ou número).
- atualizar_nivel_minimo(produto_id, valor, repo): valida e grava o campo
  ``nivel_minimo`` do produto no armazenamento.

Obs.:
- Nada é gravado quando a validação falha.
- Vírgula é aceita como separador decimal ("12,5").
"""

from __future__ import annotations

from math import isfinite
from typing import Any, Optional

from painel_estoque.config import DB_PATH
from painel_estoque.infra.repositories import ProdutoRepo
from painel_estoque.infra.logger import (
    log_transaction, log_database_operation, log_system_event
)


MENSAGEM_INVALIDO = "Insira um valor numérico válido e não-negativo."


class NivelMinimoInvalido(ValueError):
    """Valor de nível mínimo ausente, não numérico ou negativo."""

    def __init__(self, valor: Any = None, mensagem: str = MENSAGEM_INVALIDO):
        super().__init__(mensagem)
        self.valor = valor
        self.mensagem = mensagem


def parse_nivel_minimo(valor: Any) -> float:
    if valor is None or isinstance(valor, bool):
        raise NivelMinimoInvalido(valor)
    if isinstance(valor, (int, float)):
        num = float(valor)
    else:
        s = str(valor).strip()
        if s.count(",") == 1 and "." not in s:
            s = s.replace(",", ".")
        try:
            num = float(s)
        except ValueError:
            raise NivelMinimoInvalido(valor) from None
    if not isfinite(num) or num < 0:
        raise NivelMinimoInvalido(valor)
    return num


def atualizar_nivel_minimo(produto_id: str, valor: Any, repo: Optional[ProdutoRepo] = None, db_path: str = DB_PATH) -> float:
    """Valida o valor e atualiza o nível mínimo do produto.

    Args:
        produto_id: Identificador do produto.
        valor: Valor digitado pelo operador.
        repo: Repositório de produtos (padrão: ``ProdutoRepo(db_path)``).
        db_path: Banco usado quando ``repo`` não é informado.

    Returns:
        O nível mínimo gravado.

    Raises:
        NivelMinimoInvalido: se o valor não for um número não-negativo.
        KeyError: se o produto não existir.
    """
    log_system_event("nivel_minimo_start", {"id": produto_id, "valor": valor})

    try:
        nivel = parse_nivel_minimo(valor)
    except NivelMinimoInvalido as e:
        log_system_event("nivel_minimo_invalido", {"id": produto_id, "valor": valor}, level="warning")
        log_transaction("nivel_minimo", {"id": produto_id, "valor": valor}, error=e.mensagem)
        raise

    repo = repo if repo is not None else ProdutoRepo(db_path)
    try:
        repo.update_field(produto_id, "nivel_minimo", nivel)
    except Exception as e:
        error_msg = str(e)
        log_transaction("nivel_minimo", {"id": produto_id, "valor": nivel}, error=error_msg)
        log_system_event("nivel_minimo_error", {"id": produto_id, "error": error_msg}, level="error")
        raise

    log_database_operation("produtos", "UPDATE", 1, id=produto_id, nivel_minimo=nivel)
    log_transaction("nivel_minimo", {"id": produto_id}, result=nivel)
    return nivel
