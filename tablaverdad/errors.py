"""
errors.py — Taxonomia de errores de tablaverdad.

Jerarquia:
    LogicError
    ├── FormulaSyntaxError   (el parser no acepta la expresion)
    └── EvaluationError      (nodo desconocido en el AST; no deberia ocurrir)

Los caracteres no reconocidos NO son un error: el tokenizer los descarta.
"""

from __future__ import annotations


class LogicError(Exception):
    """Base de todos los errores de parseo y evaluacion."""


class FormulaSyntaxError(LogicError):
    """La secuencia de tokens no forma una expresion valida.

    El atributo ``reason`` guarda el motivo legible, sin la posicion:
        "incomplete expression"
        "unexpected token: )"
        "expected closing parenthesis"
        "trailing tokens in expression"
    """

    def __init__(self, reason: str, position: int | None = None) -> None:
        self.reason = reason
        self.position = position
        if position is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (posicion {position})")


class EvaluationError(LogicError):
    """El evaluador encontro un nodo que no sabe interpretar."""
