"""
Políticas de normalização e utilidades para o painel de estoque.

Este módulo contém as regras aplicadas de maneira uniforme antes de
qualquer soma, ordenação ou comparação: campos numéricos ausentes valem
exatamente zero, descrições ausentes valem texto vazio. As funções aqui
expostas são utilizadas pela camada de aplicação ao construir a análise
de estoque e a listagem de produtos.
"""

from __future__ import annotations

from math import isfinite
from typing import Any, Optional, Union

from painel_estoque.config import DEFAULTS


Numero = Union[int, float]


def campo(produto: Any, nome: str, default: Any = None) -> Any:
    """Lê um campo de um produto (dict/Mapping ou dataclass)."""
    if produto is None:
        return default
    getter = getattr(produto, "get", None)
    if callable(getter):
        return getter(nome, default)
    return getattr(produto, nome, default)


def quantidade(valor: Any) -> Numero:
    """Normaliza um valor numérico opcional.

    Regras:
        - ``None``, texto vazio ou valor não numérico → ``0``
        - valores integrais (``3``, ``3.0``, ``"3"``) → ``int``
        - demais valores finitos → ``float``
        - ``NaN`` e infinitos → ``0``

    Args:
        valor: Valor lido do produto.

    Returns:
        Um ``int`` sempre que o valor for integral, para que as somas sejam
        exatas; caso contrário, um ``float``.
    """
    if valor is None:
        return 0
    if isinstance(valor, bool):
        return int(valor)
    if isinstance(valor, int):
        return valor
    if isinstance(valor, str):
        s = valor.strip()
        if not s:
            return 0
        try:
            return int(s)
        except ValueError:
            pass
        try:
            valor = float(s.replace(",", "."))
        except ValueError:
            return 0
    try:
        num = float(valor)
    except (TypeError, ValueError):
        return 0
    if not isfinite(num):
        return 0
    return int(num) if num.is_integer() else num


def disponivel(produto: Any) -> Numero:
    return quantidade(campo(produto, "disponivel"))


def rotulo_truncado(descricao: Optional[Any], limite: Optional[int] = None) -> str:
    """Trunca a descrição para o rótulo do gráfico de barras.

    Acrescenta reticências somente quando a descrição original excede o
    limite. Descrição ausente vira texto vazio.

    Exemplo:
        "Industrial Grade Widget Type 9000" → "Industrial Grade Wid..."
    """
    lim = DEFAULTS.limite_rotulo if limite is None else limite
    texto = "" if descricao is None else str(descricao)
    if len(texto) > lim:
        return texto[:lim] + DEFAULTS.reticencias
    return texto


def abaixo_do_minimo(produto: Any) -> bool:
    """Indica se o disponível está abaixo do nível mínimo configurado."""
    return disponivel(produto) < quantidade(campo(produto, "nivel_minimo"))
