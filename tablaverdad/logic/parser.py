"""
parser.py — Parser recursive descent: tokens → AST.

Gramatica (BNF):
    biconditional ::= implication ('↔' implication)*
    implication   ::= disjunction ('→' implication)?
    disjunction   ::= conjunction ('∨' conjunction)*
    conjunction   ::= negation ('∧' negation)*
    negation      ::= '¬' negation | primary
    primary       ::= VAR | '(' biconditional ')'

Precedencia (de menor a mayor):
    1. ↔  (bicondicional)  — asociativo a la IZQUIERDA
    2. →  (implicacion)    — asociativo a la DERECHA
    3. ∨  (disyuncion)     — asociativo a la izquierda
    4. ∧  (conjuncion)     — asociativo a la izquierda
    5. ¬  (negacion)       — unario, a la derecha

Ojo con la asimetria:
    p → q → r  se parsea como  p → (q → r)
    p ↔ q ↔ r  se parsea como  (p ↔ q) ↔ r

∧, ∨ y ↔ usan un loop (arbol que se inclina a la izquierda);
→ y ¬ se llaman a si mismos por la derecha (arbol que se inclina a la derecha).
"""

from __future__ import annotations

from tablaverdad.errors import FormulaSyntaxError
from tablaverdad.logic import tokens as tk
from tablaverdad.logic.nodes import (
    AndNode,
    ASTNode,
    AtomNode,
    BiconditionalNode,
    ImpliesNode,
    NotNode,
    OrNode,
)
from tablaverdad.logic.tokens import Token, TokenType, tokenize

# Cada nivel de parentesis cuesta ~6 frames de Python (primary → biconditional
# → ... → negation → primary). Con 50 niveles y una cadena de ¬ de
# MAX_INPUT_LENGTH caracteres el parseo queda bajo el limite de recursion.
MAX_NESTING = 50


class FormulaParser:
    """Parser de recursive descent sobre una lista de tokens.

    Una funcion por nivel de precedencia; todas comparten el cursor ``pos``.

    Ejemplo:
        parser = FormulaParser(tokenize("p ∨ q ∧ r"))
        ast = parser.parse()
        # OrNode(AtomNode('p'), AndNode(AtomNode('q'), AtomNode('r')))
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    def parse(self) -> ASTNode:
        """Parsea la expresion completa.

        Raises:
            FormulaSyntaxError: Si la expresion es incompleta, tiene un token
                inesperado, le falta un ')', le sobran tokens al final o
                anida mas de MAX_NESTING parentesis.
        """
        tree = self._biconditional()
        if self.pos < len(self.tokens):
            raise FormulaSyntaxError("trailing tokens in expression", self.pos)
        return tree

    def _peek(self) -> Token | None:
        """Token actual sin avanzar (None al final)."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _at(self, symbol: str) -> bool:
        token = self._peek()
        return token is not None and token.is_op(symbol)

    # --- Niveles de precedencia (de menor a mayor) ---

    def _biconditional(self) -> ASTNode:
        node = self._implication()
        while self._at(tk.BICONDITIONAL):
            self._advance()
            right = self._implication()
            node = BiconditionalNode(node, right)
        return node

    def _implication(self) -> ASTNode:
        node = self._disjunction()
        if self._at(tk.IMPLIES):
            self._advance()
            # Recursion a la derecha (right-associative)
            right = self._implication()
            node = ImpliesNode(node, right)
        return node

    def _disjunction(self) -> ASTNode:
        node = self._conjunction()
        while self._at(tk.OR):
            self._advance()
            right = self._conjunction()
            node = OrNode(node, right)
        return node

    def _conjunction(self) -> ASTNode:
        node = self._negation()
        while self._at(tk.AND):
            self._advance()
            right = self._negation()
            node = AndNode(node, right)
        return node

    def _negation(self) -> ASTNode:
        if self._at(tk.NOT):
            self._advance()
            return NotNode(self._negation())
        return self._primary()

    def _primary(self) -> ASTNode:
        token = self._peek()
        if token is None:
            raise FormulaSyntaxError("incomplete expression", self.pos)

        if token.type is TokenType.VAR:
            self._advance()
            return AtomNode(token.value)

        if token.is_op(tk.LPAREN):
            if self.depth >= MAX_NESTING:
                raise FormulaSyntaxError("expression nested too deeply", self.pos)
            self._advance()
            self.depth += 1
            node = self._biconditional()
            if not self._at(tk.RPAREN):
                raise FormulaSyntaxError("expected closing parenthesis", self.pos)
            self._advance()
            self.depth -= 1
            return node

        raise FormulaSyntaxError(f"unexpected token: {token.value}", self.pos)


def parse_formula(text: str) -> ASTNode:
    """Atajo: tokeniza y parsea un string.

    Raises:
        FormulaSyntaxError: Si la expresion no es valida.
    """
    return FormulaParser(tokenize(text)).parse()


def nesting_depth(text: str) -> int:
    """Maxima profundidad de parentesis abiertos en ``text``.

    Ejemplo:
        nesting_depth("(p ∧ (q ∨ r)) → s")  → 2
        nesting_depth(")(")                 → 1
    """
    depth = deepest = 0
    for token in tokenize(text):
        if token.is_op(tk.LPAREN):
            depth += 1
            deepest = max(deepest, depth)
        elif token.is_op(tk.RPAREN):
            depth = max(depth - 1, 0)
    return deepest
