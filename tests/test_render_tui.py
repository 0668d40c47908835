"""
Testes das visões Rich (listagem e análise) e da TUI.
"""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from painel_estoque.adapters.render import display_analise, display_produtos, fmt_num
from painel_estoque.adapters.tui import PainelTUI
from painel_estoque.infra.migrations import apply_migrations
from painel_estoque.infra.repositories import ProdutoRepo
from painel_estoque.usecases.analise_estoque import gerar_analise


def _console():
    return Console(record=True, width=200, file=io.StringIO())


def _produtos():
    criticos = [
        {"id": f"C{i}", "codigo": f"C{i}", "descricao": f"Critico {i}", "disponivel": i, "status": "critico"}
        for i in range(8)
    ]
    return criticos + [
        {"id": "W", "codigo": "W", "descricao": "Industrial Grade Widget Type 9000", "disponivel": 0, "status": "ok"},
    ]


@pytest.mark.parametrize(
    "val,esperado",
    [(None, ""), (1234, "1.234"), (3.0, "3"), (1234.5, "1.234,50"), ("x", "x")],
)
def test_fmt_num(val, esperado):
    assert fmt_num(val) == esperado


def test_display_analise_destaques_e_excedentes():
    console = _console()
    display_analise(console, gerar_analise(_produtos()))
    out = console.export_text()
    assert "Industrial Grade Wid..." in out
    assert "+3 produtos críticos adicionais" in out
    assert "Nenhum produto com baixo estoque" in out
    # lista de críticos mostra apenas os 5 primeiros
    assert "Critico 4" in out
    assert "Critico 7" not in out.split("Produtos Críticos")[-1]


def test_display_analise_vazia():
    console = _console()
    display_analise(console, gerar_analise([]))
    out = console.export_text()
    assert "Nenhum produto em situação crítica" in out


def test_display_produtos():
    console = _console()
    display_produtos(console, _produtos()[:2])
    assert "2 produtos encontrados" in console.export_text()

    console = _console()
    display_produtos(console, [])
    assert "Nenhum produto encontrado com os critérios de busca." in console.export_text()


@pytest.fixture
def tui(tmp_path):
    db = str(tmp_path / "painel.sqlite")
    apply_migrations(db)
    ProdutoRepo(db).upsert([
        {"id": "P1", "codigo": "P1", "descricao": "Luva", "disponivel": 1, "nivel_minimo": 3, "status": "critico"},
        {"id": "P2", "codigo": "P2", "descricao": "Bota", "disponivel": 9, "nivel_minimo": 3, "status": "ok"},
    ])
    t = PainelTUI(db, console=_console())
    t.carregar_dados()
    return t


def test_tui_lista_filtrada(tui):
    with patch("painel_estoque.adapters.tui.Prompt.ask", side_effect=["bota", "todos"]):
        tui.visao_lista()
    assert [p["id"] for p in tui.produtos_filtrados()] == ["P2"]
    assert "1 produtos encontrados" in tui.console.export_text()


def test_tui_configurar_nivel_minimo(tui):
    with patch("painel_estoque.adapters.tui.Prompt.ask", side_effect=["P1", "7,5"]):
        tui.configurar_nivel_minimo()
    assert ProdutoRepo(tui.db_path).get("P1")["nivel_minimo"] == 7.5
    assert tui.produtos[0]["nivel_minimo"] == 7.5


def test_tui_configurar_nivel_minimo_invalido(tui):
    with patch("painel_estoque.adapters.tui.Prompt.ask", side_effect=["P1", "-3"]):
        tui.configurar_nivel_minimo()
    assert ProdutoRepo(tui.db_path).get("P1")["nivel_minimo"] == 3
    assert "Insira um valor numérico válido e não-negativo." in tui.console.export_text()


def test_tui_menu_sair(tui):
    with patch("painel_estoque.adapters.tui.Prompt.ask", side_effect=["2", "0"]):
        tui.run()
    assert "Saindo do painel" in tui.console.export_text()
