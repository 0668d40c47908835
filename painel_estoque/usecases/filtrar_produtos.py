# painel_estoque/usecases/filtrar_produtos.py
"""
UC: filtrar a listagem de produtos por texto e status.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from painel_estoque.domain.models import ProdutoLike
from painel_estoque.domain.policies import campo
from painel_estoque.domain.status import FILTRO_TODOS


def _texto(valor) -> str:
    return "" if valor is None else str(valor)


def filtrar_produtos(
    produtos: Optional[Iterable[ProdutoLike]],
    termo: Optional[str] = "",
    status: Optional[str] = FILTRO_TODOS,
) -> List[ProdutoLike]:
    """Filtra produtos pela busca (descrição ou código) e pelo status.

    A busca ignora maiúsculas/minúsculas e procura o termo como trecho da
    descrição ou do código. ``status='todos'`` (ou ``None``) não filtra.
    A ordem original é preservada.
    """
    t = _texto(termo).lower()
    out: List[ProdutoLike] = []
    for p in produtos or []:
        casa_busca = t in _texto(campo(p, "descricao")).lower() or t in _texto(campo(p, "codigo")).lower()
        casa_status = status in (None, FILTRO_TODOS) or campo(p, "status") == status
        if casa_busca and casa_status:
            out.append(p)
    return out
