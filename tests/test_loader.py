"""
Testes do loader de planilhas de produtos e da importação para o banco.
"""

import pandas as pd
import pytest

from painel_estoque.adapters.loader import _normalize_columns, load_produtos
from painel_estoque.infra.repositories import ProdutoRepo
from painel_estoque.usecases.importar_produtos import run_importar


def _planilha():
    return pd.DataFrame({
        "Código": ["P001", "P002", None],
        "Descrição": ["Parafuso Sextavado", "Porca M8", None],
        "Disponível": ["5", None, None],
        "A Caminho": ["2", "0", None],
        "Estoque Total": ["7", "3.0", None],
        "Nível Mínimo": ["10", "2,5", None],
        "Status": ["Crítico", "Atenção", None],
    })


def test_normalize_columns_sinonimos():
    df = pd.DataFrame({"Cod": ["1"], "Produto": ["x"], "Em trânsito": ["1"], "Mínimo": ["2"], "Situação": ["ok"]})
    cols = list(_normalize_columns(df).columns)
    assert cols == ["codigo", "descricao", "a_caminho", "nivel_minimo", "status"]


def test_load_produtos_xlsx(tmp_path):
    path = tmp_path / "produtos.xlsx"
    _planilha().to_excel(path, index=False)

    rows = load_produtos(str(path))

    assert len(rows) == 2  # linha sem código é ignorada
    p1, p2 = rows
    assert p1 == {
        "id": "P001",
        "codigo": "P001",
        "descricao": "Parafuso Sextavado",
        "disponivel": 5,
        "a_caminho": 2,
        "estoque_total": 7,
        "nivel_minimo": 10.0,
        "status": "critico",
    }
    assert p2["disponivel"] is None
    assert p2["estoque_total"] == 3
    assert p2["nivel_minimo"] == 2.5
    assert p2["status"] == "atencao"


def test_load_produtos_csv_ponto_e_virgula(tmp_path):
    path = tmp_path / "produtos.csv"
    path.write_text("id;codigo;descricao;disponivel;status\nX1;10;Luva;4;baixo\nX2;11;Bota;;ok\n", encoding="utf-8")
    rows = load_produtos(str(path))
    assert [r["id"] for r in rows] == ["X1", "X2"]
    assert rows[0]["codigo"] == "10"
    assert rows[1]["disponivel"] is None


def test_load_produtos_formato_invalido(tmp_path):
    path = tmp_path / "produtos.txt"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        load_produtos(str(path))


def test_run_importar(tmp_path):
    path = tmp_path / "produtos.xlsx"
    _planilha().to_excel(path, index=False)
    db = str(tmp_path / "painel.sqlite")

    res = run_importar(str(path), db_path=db)
    assert res == {"arquivo": str(path), "linhas_inseridas": 2}

    # reimportar não duplica
    run_importar(str(path), db_path=db)
    produtos = ProdutoRepo(db).get_all()
    assert [p["id"] for p in produtos] == ["P001", "P002"]
    assert produtos[0]["status"] == "critico"
