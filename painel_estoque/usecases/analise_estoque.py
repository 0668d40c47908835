# painel_estoque/usecases/analise_estoque.py
"""
Caso de uso: análise do estoque (dados dos gráficos, rankings e resumo).

Fluxo de ``gerar_analise``:
1) Ranking: cópia ordenada por disponível (crescente, estável), top 10,
   com rótulo truncado para o gráfico de barras.
2) Distribuição por status, na ordem em que cada status aparece na lista.
3) Produtos críticos e com baixo estoque, ordenados por disponível.
4) Resumo geral: quantidade de produtos e somas de disponível, a caminho
   e estoque total.

Observações:
- Função pura: não faz I/O e não altera a lista recebida.
- Campos numéricos ausentes valem 0 (ver ``domain.policies.quantidade``).
- Entrada ``None`` ou vazia produz um relatório vazio, nunca um erro.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from painel_estoque.config import DB_PATH, DEFAULTS
from painel_estoque.domain.models import (
    FatiaStatus,
    ItemRanking,
    ProdutoLike,
    RelatorioAnalise,
    ResumoGeral,
)
from painel_estoque.domain.policies import campo, disponivel, quantidade, rotulo_truncado
from painel_estoque.domain.status import cor_status, label_status, normaliza_status
from painel_estoque.infra.migrations import apply_migrations
from painel_estoque.infra.repositories import ProdutoRepo
from painel_estoque.infra.logger import (
    log_transaction, log_database_operation, log_system_event
)


def _ordenados_por_disponivel(produtos: Iterable[ProdutoLike]) -> List[ProdutoLike]:
    # sorted() devolve uma nova lista e é estável
    return sorted(produtos, key=disponivel)


def _ranking(produtos: List[ProdutoLike]) -> List[ItemRanking]:
    top = _ordenados_por_disponivel(produtos)[:DEFAULTS.limite_ranking]
    return [
        ItemRanking(
            produto=p,
            nome=rotulo_truncado(campo(p, "descricao")),
            disponivel=disponivel(p),
            a_caminho=quantidade(campo(p, "a_caminho")),
            codigo=campo(p, "codigo"),
        )
        for p in top
    ]


def _distribuicao(produtos: List[ProdutoLike]) -> List[FatiaStatus]:
    # dict preserva a ordem de inserção (primeira ocorrência)
    contagem: Dict[str, int] = {}
    for p in produtos:
        status = normaliza_status(campo(p, "status"))
        contagem[status] = contagem.get(status, 0) + 1
    return [
        FatiaStatus(status=s, label=label_status(s), quantidade=n, cor=cor_status(s))
        for s, n in contagem.items()
    ]


def _por_status(produtos: List[ProdutoLike], status: str) -> List[ProdutoLike]:
    return _ordenados_por_disponivel(p for p in produtos if campo(p, "status") == status)


def _resumo(produtos: List[ProdutoLike]) -> ResumoGeral:
    resumo = ResumoGeral()
    for p in produtos:
        resumo.total_produtos += 1
        resumo.total_disponivel += disponivel(p)
        resumo.total_a_caminho += quantidade(campo(p, "a_caminho"))
        resumo.total_estoque += quantidade(campo(p, "estoque_total"))
    return resumo


def gerar_analise(produtos: Optional[Iterable[ProdutoLike]]) -> RelatorioAnalise:
    """Deriva o relatório de análise a partir da lista de produtos.

    Args:
        produtos: Sequência de produtos (dict ou ``Produto``). ``None`` é
            tratado como lista vazia.

    Returns:
        Um ``RelatorioAnalise`` novo. As listas guardam os objetos
        originais, na ordem definida por cada regra.
    """
    itens: List[ProdutoLike] = list(produtos) if produtos else []
    if not itens:
        return RelatorioAnalise()

    return RelatorioAnalise(
        ranking_menor_estoque=_ranking(itens),
        distribuicao_status=_distribuicao(itens),
        produtos_criticos=_por_status(itens, "critico"),
        produtos_baixo_estoque=_por_status(itens, "baixo"),
        resumo=_resumo(itens),
    )


def resumir_lista(produtos: List[ProdutoLike], limite: Optional[int] = None) -> Tuple[List[ProdutoLike], int]:
    """Política de exibição "primeiros N e contagem do restante"."""
    lim = DEFAULTS.limite_destaques if limite is None else limite
    return produtos[:lim], max(0, len(produtos) - lim)


def run_analise(db_path: str = DB_PATH) -> RelatorioAnalise:
    """Carrega os produtos do banco e gera a análise."""
    log_system_event("analise_start", {"db_path": db_path})

    try:
        apply_migrations(db_path)
        produtos = ProdutoRepo(db_path).get_all()
        log_database_operation("produtos", "SELECT_ALL", len(produtos))

        relatorio = gerar_analise(produtos)
        log_system_event("analise_done", {
            "total_produtos": relatorio.resumo.total_produtos,
            "criticos": len(relatorio.produtos_criticos),
            "baixo_estoque": len(relatorio.produtos_baixo_estoque),
        })
        log_transaction("analise", {"db_path": db_path}, result=relatorio.resumo.as_dict())
        return relatorio
    except Exception as e:
        error_msg = str(e)
        log_transaction("analise", {"db_path": db_path}, error=error_msg)
        log_system_event("analise_error", {"error": error_msg}, level="error")
        raise
