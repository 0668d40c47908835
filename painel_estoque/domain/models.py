"""
Modelos (dataclasses) do domínio.

Observação importante:
- A análise e os repositórios aceitam dicionários; a dataclass ``Produto``
  é opcional e serve para tipagem/clareza. Use-a quando fizer sentido.
- Os modelos do relatório guardam os objetos originais recebidos
  (dict ou ``Produto``), sem cópia.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Dict, List, Mapping, Optional, Union


@dataclass
class Produto:
    """Produto (SKU) como entregue pelo armazenamento externo."""
    id: str
    codigo: Optional[Union[str, int]] = None
    descricao: Optional[str] = None
    disponivel: Optional[int] = None
    a_caminho: Optional[int] = None
    estoque_total: Optional[int] = None
    nivel_minimo: Optional[float] = None
    status: Optional[str] = None  # 'critico' | 'baixo' | 'atencao' | 'ok'


ProdutoLike = Union[Produto, Mapping[str, Any]]


def as_dict(produto: ProdutoLike) -> Dict[str, Any]:
    if isinstance(produto, dict):
        return dict(produto)
    if is_dataclass(produto):
        return asdict(produto)
    if isinstance(produto, Mapping):
        return dict(produto)
    raise TypeError("produto must be dict or dataclass")


@dataclass
class ItemRanking:
    """Entrada do gráfico de barras (menor estoque disponível)."""
    produto: ProdutoLike
    nome: str
    disponivel: Union[int, float]
    a_caminho: Union[int, float]
    codigo: Optional[Union[str, int]] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "nome": self.nome,
            "disponivel": self.disponivel,
            "a_caminho": self.a_caminho,
            "codigo": self.codigo,
        }


@dataclass
class FatiaStatus:
    """Fatia do gráfico de pizza (distribuição por status)."""
    status: str
    label: str
    quantidade: int
    cor: str

    def as_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "label": self.label, "quantidade": self.quantidade, "cor": self.cor}


@dataclass
class ResumoGeral:
    total_produtos: int = 0
    total_disponivel: Union[int, float] = 0
    total_a_caminho: Union[int, float] = 0
    total_estoque: Union[int, float] = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class RelatorioAnalise:
    """Relatório de análise do estoque (gerado a cada chamada)."""
    ranking_menor_estoque: List[ItemRanking] = field(default_factory=list)
    distribuicao_status: List[FatiaStatus] = field(default_factory=list)
    produtos_criticos: List[ProdutoLike] = field(default_factory=list)
    produtos_baixo_estoque: List[ProdutoLike] = field(default_factory=list)
    resumo: ResumoGeral = field(default_factory=ResumoGeral)

    def as_dict(self) -> Dict[str, Any]:
        """Representação serializável em JSON."""
        return {
            "ranking_menor_estoque": [i.as_dict() for i in self.ranking_menor_estoque],
            "distribuicao_status": [f.as_dict() for f in self.distribuicao_status],
            "produtos_criticos": [as_dict(p) for p in self.produtos_criticos],
            "produtos_baixo_estoque": [as_dict(p) for p in self.produtos_baixo_estoque],
            "resumo": self.resumo.as_dict(),
        }
