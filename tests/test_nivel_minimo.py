import pytest

from painel_estoque.infra.migrations import apply_migrations
from painel_estoque.infra.repositories import ProdutoRepo
from painel_estoque.usecases.nivel_minimo import (
    MENSAGEM_INVALIDO,
    NivelMinimoInvalido,
    atualizar_nivel_minimo,
    parse_nivel_minimo,
)


class FakeRepo:
    def __init__(self):
        self.chamadas = []

    def update_field(self, produto_id, campo, valor):
        self.chamadas.append((produto_id, campo, valor))


@pytest.mark.parametrize(
    "valor,esperado",
    [
        ("12.5", 12.5),
        ("12,5", 12.5),
        (" 0 ", 0.0),
        ("7", 7.0),
        (3, 3.0),
        (2.25, 2.25),
    ],
)
def test_parse_nivel_minimo_valido(valor, esperado):
    assert parse_nivel_minimo(valor) == esperado


@pytest.mark.parametrize("valor", ["-3", "", "abc", "1,2,3", "nan", "inf", None, -0.5, True])
def test_parse_nivel_minimo_invalido(valor):
    with pytest.raises(NivelMinimoInvalido) as exc:
        parse_nivel_minimo(valor)
    assert str(exc.value) == MENSAGEM_INVALIDO
    assert isinstance(exc.value, ValueError)


def test_valor_negativo_nao_altera_o_armazenamento():
    repo = FakeRepo()
    with pytest.raises(NivelMinimoInvalido):
        atualizar_nivel_minimo("P1", "-3", repo)
    assert repo.chamadas == []


def test_valor_valido_envia_atualizacao():
    repo = FakeRepo()
    assert atualizar_nivel_minimo("P1", "12.5", repo) == 12.5
    assert repo.chamadas == [("P1", "nivel_minimo", 12.5)]


def test_atualizacao_idempotente_no_banco(tmp_path):
    db = str(tmp_path / "painel.sqlite")
    apply_migrations(db)
    repo = ProdutoRepo(db)
    repo.upsert([{"id": "P1", "codigo": "P1", "descricao": "Luva", "disponivel": 3, "nivel_minimo": 1}])

    atualizar_nivel_minimo("P1", "12.5", repo)
    atualizar_nivel_minimo("P1", "12.5", repo)

    produto = repo.get("P1")
    assert produto["nivel_minimo"] == 12.5
    assert produto["disponivel"] == 3


def test_produto_inexistente_propaga_keyerror(tmp_path):
    db = str(tmp_path / "painel.sqlite")
    apply_migrations(db)
    with pytest.raises(KeyError):
        atualizar_nivel_minimo("nao-existe", "1", ProdutoRepo(db))
