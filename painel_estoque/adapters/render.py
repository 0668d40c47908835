# painel_estoque/adapters/render.py
"""
Renderização (Rich) das visões do painel: listagem de produtos e análise.

Usado pela CLI e pela TUI.
"""

from __future__ import annotations

from typing import List

from rich import box
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from painel_estoque.domain.models import ProdutoLike, RelatorioAnalise
from painel_estoque.domain.policies import abaixo_do_minimo, campo, quantidade
from painel_estoque.domain.status import STATUS_CONFIG
from painel_estoque.usecases.analise_estoque import resumir_lista


LARGURA_BARRA = 20


def fmt_num(val) -> str:
    """Formata números no padrão brasileiro (1.234 / 1.234,50)."""
    if val is None:
        return ""
    if isinstance(val, bool):
        return str(val)
    if isinstance(val, int):
        return f"{val:,}".replace(",", ".")
    if isinstance(val, float):
        if val.is_integer():
            return f"{int(val):,}".replace(",", ".")
        return f"{val:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return str(val)


def _texto_status(status) -> Text:
    if not status:
        return Text("")
    desc = STATUS_CONFIG.get(status)
    if desc is None:
        return Text(str(status))
    return Text(f"{desc.icone} {desc.label}", style=desc.estilo)


# -----------------------
# listagem
# -----------------------

def tabela_produtos(produtos: List[ProdutoLike], title: str = "Gerenciar Produtos") -> Table:
    table = Table(title=title, box=box.ROUNDED, caption=f"{len(produtos)} produtos encontrados")
    table.add_column("ID", style="dim")
    table.add_column("Código")
    table.add_column("Descrição")
    for col in ("Disponível", "A Caminho", "Total", "Mínimo"):
        table.add_column(col, justify="right")
    table.add_column("Status")

    for p in produtos:
        table.add_row(
            str(campo(p, "id", "")),
            str(campo(p, "codigo") or ""),
            str(campo(p, "descricao") or ""),
            fmt_num(campo(p, "disponivel")),
            fmt_num(campo(p, "a_caminho")),
            fmt_num(campo(p, "estoque_total")),
            fmt_num(campo(p, "nivel_minimo")),
            _texto_status(campo(p, "status")),
            # destaque para produtos abaixo do nível mínimo
            style="red" if abaixo_do_minimo(p) else None,
        )
    return table


def display_produtos(console: Console, produtos: List[ProdutoLike]) -> None:
    if not produtos:
        console.print(Panel(
            "Nenhum produto encontrado com os critérios de busca.",
            title="Gerenciar Produtos", border_style="yellow",
        ))
        return
    console.print(tabela_produtos(produtos))


# -----------------------
# análise
# -----------------------

def _tile(titulo: str, valor, estilo: str) -> Panel:
    return Panel(Text(fmt_num(valor), style=f"bold {estilo}", justify="center"), title=titulo, border_style=estilo)


def _barra(valor, maximo, cor: str) -> Text:
    if maximo <= 0:
        return Text("")
    n = int(round(LARGURA_BARRA * max(valor, 0) / maximo))
    return Text("█" * n, style=cor)


def _lista_destaque(produtos: List[ProdutoLike], titulo: str, vazio: str, sufixo: str, estilo: str) -> Panel:
    if not produtos:
        return Panel(Text(vazio, style="dim"), title=f"{titulo} (0 itens)", border_style=estilo)
    primeiros, restantes = resumir_lista(produtos)
    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("Código")
    table.add_column("Descrição")
    table.add_column("Disponível", justify="right", style=f"bold {estilo}")
    for p in primeiros:
        table.add_row(
            str(campo(p, "codigo") or ""),
            str(campo(p, "descricao") or ""),
            fmt_num(quantidade(campo(p, "disponivel"))),
        )
    corpo = table
    if restantes:
        corpo = Group(table, Text(f"+{restantes} {sufixo}", style="dim", justify="center"))
    return Panel(corpo, title=f"{titulo} ({len(produtos)} itens)", border_style=estilo)


def display_analise(console: Console, relatorio: RelatorioAnalise) -> None:
    """Exibe resumo, ranking, distribuição por status e listas de destaque."""
    r = relatorio.resumo
    console.print(Columns([
        _tile("Total de Produtos", r.total_produtos, "blue"),
        _tile("Total Disponível", r.total_disponivel, "green"),
        _tile("Total A Caminho", r.total_a_caminho, "dark_orange"),
        _tile("Estoque Total", r.total_estoque, "magenta"),
    ], equal=True, expand=True))

    # Top 10 - menor estoque
    ranking = Table(
        title="Top 10 - Produtos com Menor Estoque",
        caption="Produtos ordenados por quantidade disponível (menor para maior)",
        box=box.ROUNDED,
    )
    ranking.add_column("Código")
    ranking.add_column("Produto")
    ranking.add_column("Disponível", justify="right")
    ranking.add_column("A Caminho", justify="right")
    ranking.add_column("")
    maximo = max([max(i.disponivel, i.a_caminho) for i in relatorio.ranking_menor_estoque] or [0])
    for item in relatorio.ranking_menor_estoque:
        barra = _barra(item.disponivel, maximo, "#3b82f6")
        barra.append("\n")
        barra.append_text(_barra(item.a_caminho, maximo, "#10b981"))
        ranking.add_row(
            str(item.codigo or ""),
            item.nome,
            fmt_num(item.disponivel),
            fmt_num(item.a_caminho),
            barra,
        )
    console.print(ranking)

    # Distribuição por status
    total = sum(f.quantidade for f in relatorio.distribuicao_status)
    dist = Table(title="Distribuição por Status", box=box.ROUNDED)
    dist.add_column("Status")
    dist.add_column("Produtos", justify="right")
    dist.add_column("%", justify="right")
    for fatia in relatorio.distribuicao_status:
        pct = (100.0 * fatia.quantidade / total) if total else 0.0
        dist.add_row(
            Text(f"● {fatia.label}", style=fatia.cor),
            fmt_num(fatia.quantidade),
            f"{pct:.0f}%",
        )
    console.print(dist)

    console.print(Columns([
        _lista_destaque(
            relatorio.produtos_criticos, "Produtos Críticos",
            "Nenhum produto em situação crítica", "produtos críticos adicionais", "red",
        ),
        _lista_destaque(
            relatorio.produtos_baixo_estoque, "Baixo Estoque",
            "Nenhum produto com baixo estoque", "produtos com baixo estoque adicionais", "dark_orange",
        ),
    ], equal=True, expand=True))
