"""
verdict.py — Clasificador del veredicto final de una tabla de verdad.

Regla:
    todos 1          → Tautología
    todos 0          → Contradicción
    mezcla de 0 y 1  → Indeterminación (contingencia)
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Verdict(str, Enum):
    """Veredicto de una expresion. El valor es la etiqueta que se muestra."""

    TAUTOLOGY = "Tautología"
    CONTRADICTION = "Contradicción"
    CONTINGENCY = "Indeterminación"

    def __str__(self) -> str:
        return self.value


def classify(results: Iterable[int]) -> Verdict:
    """Clasifica la columna de resultados de una tabla.

    Args:
        results: Valores 0/1 de la ultima columna, uno por fila.

    Raises:
        ValueError: Si no hay ningun resultado.
    """
    distinct = set(results)
    if not distinct:
        raise ValueError("No se puede clasificar una tabla sin filas")
    if len(distinct) == 1:
        return Verdict.TAUTOLOGY if distinct.pop() == 1 else Verdict.CONTRADICTION
    return Verdict.CONTINGENCY
