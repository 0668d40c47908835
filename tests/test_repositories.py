import pytest

from painel_estoque.domain.models import Produto
from painel_estoque.infra.db import connect
from painel_estoque.infra.migrations import apply_migrations
from painel_estoque.infra.repositories import ProdutoRepo


@pytest.fixture
def db(tmp_path):
    path = str(tmp_path / "painel.sqlite")
    apply_migrations(path)
    return path


def test_migrations_idempotentes(db):
    apply_migrations(db)
    with connect(db) as c:
        assert c.execute("PRAGMA user_version;").fetchone()[0] == 2
        indices = {r[0] for r in c.execute("SELECT name FROM sqlite_master WHERE type = 'index'")}
    assert {"idx_produtos_status", "idx_produtos_codigo"} <= indices


def test_upsert_e_get_all_preservam_ordem(db):
    repo = ProdutoRepo(db)
    n = repo.upsert([
        {"id": "B", "codigo": 2, "descricao": "Porca", "disponivel": 1, "status": "baixo"},
        Produto(id="A", codigo="A1", descricao="Arruela", disponivel=None, status="ok"),
    ])
    assert n == 2
    produtos = repo.get_all()
    assert [p["id"] for p in produtos] == ["B", "A"]
    assert produtos[0]["codigo"] == "2"
    assert produtos[1]["disponivel"] is None
    assert set(produtos[0]) == {
        "id", "codigo", "descricao", "disponivel", "a_caminho",
        "estoque_total", "nivel_minimo", "status",
    }


def test_upsert_atualiza_existente(db):
    repo = ProdutoRepo(db)
    repo.upsert([{"id": "A", "disponivel": 1}])
    repo.upsert([{"id": "A", "disponivel": 9, "status": "ok"}])
    produtos = repo.get_all()
    assert len(produtos) == 1
    assert produtos[0]["disponivel"] == 9


def test_upsert_vazio_e_sem_id(db):
    repo = ProdutoRepo(db)
    assert repo.upsert([]) == 0
    with pytest.raises(ValueError):
        repo.upsert([{"codigo": "X"}])


def test_update_field(db):
    repo = ProdutoRepo(db)
    repo.upsert([{"id": "A", "nivel_minimo": 1}])
    repo.update_field("A", "nivel_minimo", 4.5)
    assert repo.get("A")["nivel_minimo"] == 4.5
    assert repo.get("nao-existe") is None


def test_update_field_rejeita_campo_e_id_invalidos(db):
    repo = ProdutoRepo(db)
    repo.upsert([{"id": "A", "disponivel": 1}])
    with pytest.raises(ValueError):
        repo.update_field("A", "disponivel", 10)
    with pytest.raises(KeyError):
        repo.update_field("Z", "nivel_minimo", 1)
    assert repo.get("A")["disponivel"] == 1
