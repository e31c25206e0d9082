"""
nodes.py — Nodos del arbol de sintaxis abstracta (AST).

Cada expresion se representa como un arbol inmutable:

    "p ∧ ¬q → r"

            ImpliesNode
            /         \\
        AndNode      AtomNode(r)
        /     \\
    AtomNode(p) NotNode
                  |
               AtomNode(q)

Variantes (conjunto cerrado):
    AtomNode          variable p..t
    NotNode           ¬φ
    AndNode           φ ∧ ψ
    OrNode            φ ∨ ψ
    ImpliesNode       φ → ψ
    BiconditionalNode φ ↔ ψ

str(nodo) devuelve la expresion con TODOS los parentesis explicitos,
util para ver como agrupo el parser:

    str(parse_formula("p → q → r"))  →  "(p → (q → r))"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tablaverdad.logic import tokens


class ASTNode:
    """Nodo base del arbol de sintaxis abstracta."""

    __slots__ = ()


@dataclass(frozen=True)
class AtomNode(ASTNode):
    """Variable proposicional (hoja del arbol)."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class NotNode(ASTNode):
    """Negacion: ¬φ"""

    operand: ASTNode

    def __str__(self) -> str:
        return f"{tokens.NOT}{self.operand}"


@dataclass(frozen=True)
class BinaryNode(ASTNode):
    """Base de los conectores binarios: φ ○ ψ"""

    symbol: ClassVar[str] = "?"

    left: ASTNode
    right: ASTNode

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True)
class AndNode(BinaryNode):
    symbol: ClassVar[str] = tokens.AND


@dataclass(frozen=True)
class OrNode(BinaryNode):
    symbol: ClassVar[str] = tokens.OR


@dataclass(frozen=True)
class ImpliesNode(BinaryNode):
    symbol: ClassVar[str] = tokens.IMPLIES


@dataclass(frozen=True)
class BiconditionalNode(BinaryNode):
    symbol: ClassVar[str] = tokens.BICONDITIONAL


def extract_atoms(node: ASTNode) -> list[str]:
    """Variables del arbol en orden de primera aparicion (izquierda a derecha).

    Ejemplo:
        extract_atoms(parse_formula("q ∧ (p ∨ q)"))  →  ["q", "p"]
    """
    seen: list[str] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, AtomNode):
            if current.name not in seen:
                seen.append(current.name)
        elif isinstance(current, NotNode):
            stack.append(current.operand)
        elif isinstance(current, BinaryNode):
            # right primero para que left salga antes de la pila
            stack.append(current.right)
            stack.append(current.left)
    return seen
