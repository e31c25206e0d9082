"""
tokens.py — Tokenizer de expresiones logicas.

Convierte el texto crudo en una lista de tokens tipados:

    "p ∧ ¬q"  →  [VAR(p), OP(∧), OP(¬), VAR(q)]

Reglas:
    1. Se eliminan TODOS los espacios en blanco.
    2. p, q, r, s, t  → token VAR.
    3. ¬ ∧ ∨ → ↔ ( )  → token OP.
    4. Cualquier otro caracter se ignora en silencio (no es un error).

La regla 4 hace que "p @ ∧ q" y "p∧q" produzcan exactamente los mismos
tokens. Es el comportamiento de la calculadora original: lo que no es
parte del alfabeto simplemente no existe para el parser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


# =====================================================================
# ALFABETO
# =====================================================================

# Orden canonico: tambien define el orden de descubrimiento de variables.
VARIABLES: tuple[str, ...] = ("p", "q", "r", "s", "t")

NOT = "¬"
AND = "∧"
OR = "∨"
IMPLIES = "→"
BICONDITIONAL = "↔"
LPAREN = "("
RPAREN = ")"

OPERATORS: tuple[str, ...] = (NOT, AND, OR, IMPLIES, BICONDITIONAL, LPAREN, RPAREN)

_WHITESPACE = re.compile(r"\s+")


class TokenType(str, Enum):
    """Los dos tipos de token: variable u operador (incluye parentesis)."""

    VAR = "VAR"
    OP = "OP"


@dataclass(frozen=True)
class Token:
    """Un token individual. Inmutable."""

    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r})"

    def is_op(self, symbol: str) -> bool:
        """¿Es el operador ``symbol``?"""
        return self.type is TokenType.OP and self.value == symbol


def tokenize(text: str) -> list[Token]:
    """Convierte una expresion en una lista de tokens.

    Nunca lanza excepciones: los caracteres fuera del alfabeto se descartan.

    Ejemplo:
        tokenize("(p → q) ∨ r")
        → [OP('('), VAR('p'), OP('→'), VAR('q'), OP(')'), OP('∨'), VAR('r')]
    """
    text = _WHITESPACE.sub("", text)
    tokens: list[Token] = []

    for char in text:
        if char in VARIABLES:
            tokens.append(Token(TokenType.VAR, char))
        elif char in OPERATORS:
            tokens.append(Token(TokenType.OP, char))
        # Cualquier otro caracter: se ignora

    return tokens
