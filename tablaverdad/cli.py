"""
🧮 CLI — Tabla de verdad de una expresion logica.

Usage:
    tablaverdad "p ∧ q → r"
    tablaverdad "p ∨ ¬p" --formato html --salida tabla.html
    tablaverdad "p → q → r" --arbol
    tablaverdad --interactivo

Examples:
    $ tablaverdad "p ∨ ¬p"
            p ∨ ¬p
    ┏━━━┳━━━━━━━━┓
    ┃ p ┃ p ∨ ¬p ┃
    ┡━━━╇━━━━━━━━┩
    │ 0 │   1    │
    │ 1 │   1    │
    └───┴────────┘
    Resultado: Tautología
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape

from tablaverdad.config import OUTPUT_FORMATS, Settings
from tablaverdad.errors import FormulaSyntaxError
from tablaverdad.log import setup_logging
from tablaverdad.logic.nodes import extract_atoms
from tablaverdad.logic.parser import MAX_NESTING, nesting_depth, parse_formula
from tablaverdad.table.generator import discover_variables, generate_truth_table
from tablaverdad.table.render import build_rich_table, render_json, render_result
from tablaverdad.templates import (
    CLEAR_COMMAND,
    DESCRIPTION,
    EXIT_COMMANDS,
    PALETTE,
    SYMBOLS_COMMAND,
    TITLE,
)

console = Console()
logger = logging.getLogger(__name__)


def check_input(expression: str, settings: Settings) -> bool:
    """¿La expresion cabe en max_input_length y en MAX_NESTING? Si no, avisa y devuelve False."""
    if len(expression) > settings.max_input_length:
        console.print(
            f"[bold red]❌ Expresión demasiado larga: {len(expression)} caracteres "
            f"(máximo {settings.max_input_length})[/]"
        )
        return False

    depth = nesting_depth(expression)
    if depth > MAX_NESTING:
        console.print(
            f"[bold red]❌ Expresión demasiado anidada: {depth} niveles de paréntesis "
            f"(máximo {MAX_NESTING})[/]"
        )
        return False
    return True


def show_tree(expression: str) -> None:
    """Imprime la expresion con todos los parentesis, o el error de sintaxis."""
    try:
        tree = parse_formula(expression)
        rendered = str(tree)
    except FormulaSyntaxError as e:
        console.print(f"[yellow]⚠️ Error de sintaxis: {escape(str(e))}[/]")
        return
    except RecursionError:
        console.print("[yellow]⚠️ Expresión demasiado profunda para mostrar el árbol[/]")
        return
    console.print(f"🌳 Árbol: {rendered}", markup=False)

    atoms = extract_atoms(tree)
    discovered = discover_variables(expression)
    if set(atoms) != set(discovered):
        console.print(
            f"[yellow]⚠️ Variables en el árbol {escape(str(atoms))} ≠ variables de la tabla {escape(str(discovered))}[/]"
        )


def run_expression(
    expression: str,
    output_format: str,
    output_path: str | None = None,
    tree: bool = False,
) -> None:
    """Genera la tabla de ``expression`` y la muestra en el formato pedido."""
    if tree:
        show_tree(expression)

    table = generate_truth_table(expression)
    logger.debug("Tabla generada: %d filas, veredicto %s", len(table.rows), table.verdict)

    if output_format == "tabla":
        if output_path:
            with open(output_path, "w", encoding="utf-8") as f:
                Console(file=f, width=120).print(build_rich_table(table, expression))
        else:
            console.print(build_rich_table(table, expression))
    else:
        text = render_result(table, expression) if output_format == "html" else render_json(table, expression)
        if output_path:
            Path(output_path).write_text(text + "\n", encoding="utf-8")
        else:
            console.print(text, markup=False, highlight=False)

    if output_path:
        console.print(f"[bold green]✅ Guardado en {output_path}[/]")


def interactive(settings: Settings, output_format: str, tree: bool) -> None:
    """Modo interactivo: la expresion se arma con la paleta o se escribe directo.

    - ``:p``, ``:y``, ``:si``... agregan un simbolo al buffer.
    - Enter (linea vacia) evalua el buffer.
    - Cualquier otro texto se evalua directamente.
    """
    console.print(Markdown(DESCRIPTION))
    console.print(f"[bold]Modo interactivo — '{SYMBOLS_COMMAND}' muestra la paleta, 'salir' termina\n[/]")
    buffer = ""

    while True:
        try:
            line = input(f"📝 {buffer}> ").strip()
        except (KeyboardInterrupt, EOFError):
            break

        if line.lower() in EXIT_COMMANDS:
            break
        if line in PALETTE:
            buffer += PALETTE[line]
            continue
        if line == CLEAR_COMMAND:
            buffer = ""
            continue
        if line == SYMBOLS_COMMAND:
            for command, symbol in PALETTE.items():
                console.print(f"   {command:<6} {symbol}", markup=False)
            continue

        expression = line or buffer
        if not expression:
            continue
        if check_input(expression, settings):
            run_expression(expression, output_format, tree=tree)
        buffer = ""

    console.print("\n[bold]👋 ¡Hasta luego![/]")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Tabla de verdad de una expresión de lógica proposicional",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("expresion", type=str, nargs="?", help="Expresión a evaluar, ej: 'p ∧ q → r'")
    parser.add_argument(
        "--formato",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Formato de salida (default: TABLAVERDAD_FORMAT o 'tabla')",
    )
    parser.add_argument("--salida", type=str, default=None, help="Archivo donde guardar la salida")
    parser.add_argument("--arbol", action="store_true", help="Mostrar la expresión con todos los paréntesis")
    parser.add_argument("--config", type=str, default=None, help="Archivo JSON de configuración")
    parser.add_argument("--interactivo", action="store_true", help="Modo interactivo")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = Settings.from_json(args.config) if args.config else Settings.from_env()
    except (OSError, ValueError, TypeError) as e:
        console.print(f"[bold red]❌ Configuración inválida: {escape(str(e))}[/]")
        return 2

    setup_logging(settings.log_level)
    output_format = args.formato or settings.output_format

    if args.interactivo:
        console.print(f"[bold cyan]{TITLE}[/]")
        interactive(settings, output_format, args.arbol)
        return 0

    if args.expresion is None:
        console.print(f"[bold cyan]{TITLE}[/]")
        console.print(Markdown(DESCRIPTION))
        console.print("[yellow]   Pasa una expresión o usa --interactivo[/]")
        return 1

    if not check_input(args.expresion, settings):
        return 1

    run_expression(args.expresion, output_format, args.salida, tree=args.arbol)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
