# painel_estoque/adapters/cli.py
"""
CLI do painel de estoque (Typer).

Comandos principais:
- migrate                  -> aplica migrações
- importar <arquivo>       -> importa produtos de uma planilha XLSX/CSV
- produtos                 -> lista produtos (busca por texto e filtro por status)
- nivel-minimo <id> <val>  -> configura o nível mínimo de um produto
- analise                  -> resumo, ranking, distribuição por status e destaques
- tui                      -> interface terminal interativa
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console

from painel_estoque.config import DB_PATH
from painel_estoque.domain.models import as_dict
from painel_estoque.domain.status import FILTRO_TODOS, STATUS_CONFIG
from painel_estoque.infra.migrations import apply_migrations
from painel_estoque.infra.repositories import ProdutoRepo
from painel_estoque.adapters.render import display_analise, display_produtos
from painel_estoque.usecases.analise_estoque import run_analise
from painel_estoque.usecases.filtrar_produtos import filtrar_produtos
from painel_estoque.usecases.importar_produtos import run_importar
from painel_estoque.usecases.nivel_minimo import NivelMinimoInvalido, atualizar_nivel_minimo


app = typer.Typer(help="Painel de Estoque (CLI)")
console = Console()
err_console = Console(stderr=True)


# -----------------------
# util
# -----------------------

def _print_json(obj) -> None:
    typer.echo(json.dumps(obj, ensure_ascii=False, indent=2))


def _valida_status(valor: str) -> str:
    if valor != FILTRO_TODOS and valor not in STATUS_CONFIG:
        opcoes = ", ".join([FILTRO_TODOS, *STATUS_CONFIG])
        raise typer.BadParameter(f"use um de: {opcoes}")
    return valor


# -----------------------
# comandos de infra
# -----------------------

@app.command("migrate")
def cmd_migrate(db_path: str = typer.Option(DB_PATH, "--db", help="Caminho do SQLite")):
    """Aplica migrações do banco de produtos."""
    apply_migrations(db_path)
    typer.echo(f">> Migrações aplicadas em: {db_path}")


@app.command("importar")
def cmd_importar(
    path: str = typer.Argument(..., help="Caminho da planilha (XLSX ou CSV) de PRODUTOS"),
    db_path: str = typer.Option(DB_PATH, "--db", help="Caminho do SQLite"),
):
    """Importa (upsert) produtos a partir de uma planilha."""
    info = run_importar(path, db_path=db_path)
    typer.echo(f">> {info['linhas_inseridas']} produtos importados de {info['arquivo']}")


# -----------------------
# comandos de produtos
# -----------------------

@app.command("produtos")
def cmd_produtos(
    busca: str = typer.Option("", "--busca", "-b", help="Trecho do código ou da descrição"),
    status: str = typer.Option(FILTRO_TODOS, "--status", "-s", callback=_valida_status,
                               help="todos | critico | baixo | atencao | ok"),
    as_json: bool = typer.Option(False, "--json", help="Saída em JSON"),
    db_path: str = typer.Option(DB_PATH, "--db", help="Caminho do SQLite"),
):
    """Lista os produtos, com busca por texto e filtro por status."""
    apply_migrations(db_path)
    produtos = filtrar_produtos(ProdutoRepo(db_path).get_all(), busca, status)
    if as_json:
        _print_json([as_dict(p) for p in produtos])
        return
    display_produtos(console, produtos)


@app.command("nivel-minimo")
def cmd_nivel_minimo(
    produto_id: str = typer.Argument(..., help="ID do produto"),
    valor: str = typer.Argument(..., help="Novo nível mínimo (ex.: 12.5)"),
    db_path: str = typer.Option(DB_PATH, "--db", help="Caminho do SQLite"),
):
    """Configura o nível mínimo de estoque de um produto."""
    apply_migrations(db_path)
    try:
        nivel = atualizar_nivel_minimo(produto_id, valor, ProdutoRepo(db_path))
    except NivelMinimoInvalido as e:
        err_console.print(f"[red]{e.mensagem}[/red]")
        raise typer.Exit(code=1)
    except KeyError:
        err_console.print(f"[red]Produto não encontrado: {produto_id}[/red]")
        raise typer.Exit(code=1)
    typer.echo(f">> Nível mínimo de {produto_id} atualizado para {nivel:g}")


@app.command("analise")
def cmd_analise(
    as_json: bool = typer.Option(False, "--json", help="Saída em JSON"),
    db_path: str = typer.Option(DB_PATH, "--db", help="Caminho do SQLite"),
):
    """Exibe a análise do estoque."""
    relatorio = run_analise(db_path=db_path)
    if as_json:
        _print_json(relatorio.as_dict())
        return
    display_analise(console, relatorio)


@app.command("tui")
def cmd_tui(db_path: str = typer.Option(DB_PATH, "--db", help="Caminho do SQLite")):
    """
    Inicia a Interface Terminal (TUI) interativa do painel.

    A TUI alterna entre a listagem de produtos e a análise do estoque,
    e permite configurar o nível mínimo de cada produto.
    """
    from painel_estoque.adapters.tui import main_tui
    try:
        main_tui(db_path)
    except KeyboardInterrupt:
        typer.echo("\nSaindo...")
        raise typer.Exit(0)


# Entry point opcional:
def main(argv: Optional[list] = None):
    app(args=argv)


if __name__ == "__main__":
    main()
