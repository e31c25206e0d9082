"""
generator.py — Generador de tablas de verdad.

Flujo:
    1. Descubrir variables: busca p, q, r, s, t (en ese orden) como palabra
       completa dentro del TEXTO. No mira el AST: si la expresion no parsea,
       las variables encontradas igual definen las filas.
    2. Enumerar: para n variables, i = 0 .. 2^n - 1. La variable j toma el
       bit (n-1-j) de i, asi que la primera variable cambia mas lento.
    3. Evaluar cada fila con evaluate_expression (fail-soft: error → 0).

Ejemplo:
    table = generate_truth_table("p → q")
    table.variables  → ["p", "q"]
    table.rows       → [[0, 0, 1],
                        [0, 1, 1],
                        [1, 0, 0],
                        [1, 1, 1]]
    table.verdict    → Verdict.CONTINGENCY

Sin variables (p.ej. "()" o "") la expresion es constante: una sola fila
con el resultado.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from tablaverdad.logic.evaluator import evaluate_expression
from tablaverdad.logic.tokens import VARIABLES
from tablaverdad.table.verdict import Verdict, classify

# \b en modo ASCII: "á" o "ñ" no cuentan como letra de palabra
_WORD_PATTERNS = {v: re.compile(rf"\b{v}\b", re.ASCII) for v in VARIABLES}


class TruthTable(BaseModel):
    """Resultado de generate_truth_table.

    Cada fila = bits de las variables (en el orden de ``variables``)
    seguidos del resultado de la expresion.
    """

    variables: list[str] = Field(description="Variables en orden canonico p, q, r, s, t.")
    rows: list[list[int]] = Field(description="Filas 0/1: variables + resultado.")

    @property
    def results(self) -> list[int]:
        """Ultima columna: el valor de la expresion en cada fila."""
        return [row[-1] for row in self.rows]

    @property
    def verdict(self) -> Verdict:
        return classify(self.results)


def discover_variables(text: str) -> list[str]:
    """Variables del alfabeto que aparecen como palabra completa en ``text``.

    Ejemplo:
        discover_variables("r ∧ p")   → ["p", "r"]
        discover_variables("pq")      → []   (no hay palabra "p" ni "q")
    """
    return [v for v in VARIABLES if _WORD_PATTERNS[v].search(text)]


def generate_truth_table(expression: str) -> TruthTable:
    """Genera la tabla de verdad completa de ``expression``.

    Nunca lanza: las expresiones mal formadas dan una columna de ceros.
    """
    variables = discover_variables(expression)
    n = len(variables)

    if n == 0:
        return TruthTable(variables=[], rows=[[evaluate_expression(expression, {})]])

    rows: list[list[int]] = []
    for i in range(2**n):
        bits = [(i >> (n - 1 - j)) & 1 for j in range(n)]
        assignment = {var: bit == 1 for var, bit in zip(variables, bits)}
        rows.append(bits + [evaluate_expression(expression, assignment)])

    return TruthTable(variables=variables, rows=rows)
