"""
evaluator.py — Evaluador: AST + asignacion → True/False.

Dos niveles:
    evaluate(node, assignment)         → bool, puede lanzar EvaluationError
    evaluate_expression(text, values)  → 0/1, NUNCA lanza

evaluate_expression es la frontera fail-soft que usa la tabla de verdad:
si la expresion no parsea (o algo falla al evaluar), se registra en el log
y la fila vale 0. Una expresion mal formada produce una tabla toda en 0.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from tablaverdad.errors import EvaluationError, LogicError
from tablaverdad.logic.nodes import (
    AndNode,
    ASTNode,
    AtomNode,
    BiconditionalNode,
    ImpliesNode,
    NotNode,
    OrNode,
)
from tablaverdad.logic.parser import parse_formula

logger = logging.getLogger(__name__)


def evaluate(node: ASTNode, assignment: Mapping[str, bool]) -> bool:
    """Evalua un AST con una asignacion de valores.

    Una variable ausente en ``assignment`` vale False (no es un error).
    Ambos lados de ∧ y ∨ se evaluan siempre.

    Raises:
        EvaluationError: Si el nodo no es de un tipo conocido.

    Ejemplo:
        ast = parse_formula("p → q")
        evaluate(ast, {"p": True, "q": False})  → False
        evaluate(ast, {})                        → True
    """
    if isinstance(node, AtomNode):
        return bool(assignment.get(node.name, False))

    if isinstance(node, NotNode):
        return not evaluate(node.operand, assignment)

    if isinstance(node, AndNode):
        left = evaluate(node.left, assignment)
        right = evaluate(node.right, assignment)
        return left and right

    if isinstance(node, OrNode):
        left = evaluate(node.left, assignment)
        right = evaluate(node.right, assignment)
        return left or right

    if isinstance(node, ImpliesNode):
        left = evaluate(node.left, assignment)
        right = evaluate(node.right, assignment)
        # F → cualquier cosa = T
        return (not left) or right

    if isinstance(node, BiconditionalNode):
        return evaluate(node.left, assignment) == evaluate(node.right, assignment)

    raise EvaluationError(f"unknown node type: {type(node).__name__}")


def evaluate_expression(text: str, assignment: Mapping[str, bool]) -> int:
    """Parsea y evalua ``text``; devuelve 1 o 0.

    Cualquier error de parseo o evaluacion se registra como warning y
    se sustituye por 0. Tambien RecursionError, para cadenas absurdas como
    "¬¬¬¬...p" mas largas que lo que acepta el CLI.
    """
    try:
        tree = parse_formula(text)
        return 1 if evaluate(tree, assignment) else 0
    except (LogicError, RecursionError) as e:
        logger.warning("Error evaluando la expresion %r: %s", text, e)
        return 0
