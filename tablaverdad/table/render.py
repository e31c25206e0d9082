"""
render.py — Presentacion de una TruthTable.

Tres salidas:
    render_result(table, expr)     → HTML (tabla + linea de veredicto)
    build_rich_table(table, expr)  → rich.table.Table para la terminal
    render_json(table, expr)       → JSON con variables, filas y veredicto

Estructura del HTML:
    <table><thead><tr><th>p</th>...<th>EXPR</th></tr></thead>
    <tbody><tr><td>0</td>...</tr>...</tbody></table>
    <p><strong>Resultado: Tautología</strong></p>
"""

from __future__ import annotations

import html
import json

from rich.table import Table
from rich.text import Text

from tablaverdad.table.generator import TruthTable
from tablaverdad.templates import VERDICT_LINE


def render_result(table: TruthTable, expression: str) -> str:
    """Renderiza la tabla como HTML, con el veredicto en negrita al final."""
    parts = ["<table><thead><tr>"]
    for var in table.variables:
        parts.append(f"<th>{var}</th>")
    parts.append(f"<th>{html.escape(expression)}</th>")
    parts.append("</tr></thead><tbody>")

    for row in table.rows:
        parts.append("<tr>")
        parts.extend(f"<td>{cell}</td>" for cell in row)
        parts.append("</tr>")

    parts.append("</tbody></table>")
    parts.append(f"<p><strong>{VERDICT_LINE.format(verdict=table.verdict)}</strong></p>")
    return "".join(parts)


def build_rich_table(table: TruthTable, expression: str) -> Table:
    """Construye la tabla para imprimir con rich. El veredicto va en el caption."""
    rich_table = Table(
        title=Text(expression),
        caption=VERDICT_LINE.format(verdict=table.verdict),
        caption_style="bold",
    )
    for var in table.variables:
        rich_table.add_column(var, style="cyan", justify="center")
    # Text: un "[" en la expresion no debe interpretarse como markup
    rich_table.add_column(Text(expression or " "), style="bold", justify="center")

    for row in table.rows:
        *bits, result = row
        rich_table.add_row(
            *(str(b) for b in bits),
            f"[green]{result}[/]" if result == 1 else f"[red]{result}[/]",
        )
    return rich_table


def render_json(table: TruthTable, expression: str) -> str:
    """Serializa la tabla y el veredicto a JSON (UTF-8 legible)."""
    data = {"expression": expression, **table.model_dump(), "verdict": table.verdict.value}
    return json.dumps(data, ensure_ascii=False, indent=2)
