"""
UI text templates for the CLI and the HTML output.
"""

TITLE = "🧮 Tabla de Verdad — Lógica Proposicional"
DESCRIPTION = """
Genera la tabla de verdad de una expresión con las variables p, q, r, s, t.

**Conectores**: ¬  ∧  ∨  →  ↔   y paréntesis ( )
**Ejemplo**: (p ∧ ¬q) → r
"""

VERDICT_LINE = "Resultado: {verdict}"

# Paleta de simbolos: comando del modo interactivo → simbolo que agrega.
# Equivale a los botones de la calculadora.
PALETTE: dict[str, str] = {
    ":p": "p",
    ":q": "q",
    ":r": "r",
    ":s": "s",
    ":t": "t",
    ":y": "∧",
    ":o": "∨",
    ":no": "¬",
    ":si": "→",
    ":sii": "↔",
    ":(": "(",
    ":)": ")",
}

CLEAR_COMMAND = ":limpiar"
SYMBOLS_COMMAND = ":simbolos"
EXIT_COMMANDS = ("salir", "exit", "quit")
