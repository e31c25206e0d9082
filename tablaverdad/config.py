"""
Settings — La configuracion de tablaverdad en un solo lugar.

¿Por qué frozen=True?
    Para que nadie cambie la configuracion a mitad de una ejecucion.
    Si quieres otra configuracion, crea una nueva instancia.

¿Cómo se usa?
    settings = Settings()                          # defaults
    settings = Settings(max_input_length=128)      # override un valor
    settings = Settings.from_env()                 # desde .env / entorno
    settings = Settings.from_json("config.json")   # desde archivo

Variables de entorno (se leen tras load_dotenv()):
    TABLAVERDAD_MAX_INPUT    largo maximo de la expresion
    TABLAVERDAD_LOG_LEVEL    nivel de logging (DEBUG, INFO, WARNING, ...)
    TABLAVERDAD_FORMAT       formato de salida: tabla, html o json
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from dotenv import load_dotenv

OUTPUT_FORMATS: tuple[str, ...] = ("tabla", "html", "json")

# Tope de max_input_length: con parser.MAX_NESTING, el parseo de cualquier
# entrada aceptada cabe en el limite de recursion de Python.
MAX_INPUT_LENGTH = 512

ENV_MAX_INPUT = "TABLAVERDAD_MAX_INPUT"
ENV_LOG_LEVEL = "TABLAVERDAD_LOG_LEVEL"
ENV_FORMAT = "TABLAVERDAD_FORMAT"


@dataclass(frozen=True)
class Settings:
    """Configuracion de la capa de presentacion.

    El nucleo (parser, evaluador, generador) no depende de esto: es puro.
    """

    # max_input_length: largo maximo aceptado para una expresion.
    # El trabajo del nucleo ya esta acotado (32 filas como mucho), pero el
    # parseo crece con el largo del texto.
    max_input_length: int = MAX_INPUT_LENGTH

    # log_level: nivel del logger raiz. Con WARNING se ven los errores de
    # parseo que la tabla convierte en 0.
    log_level: str = "WARNING"

    # output_format: formato por defecto del CLI.
    output_format: str = "tabla"

    def __post_init__(self) -> None:
        if not isinstance(self.max_input_length, int) or not 0 < self.max_input_length <= MAX_INPUT_LENGTH:
            raise ValueError(
                f"max_input_length debe estar entre 1 y {MAX_INPUT_LENGTH}, recibí {self.max_input_length!r}"
            )

        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise ValueError(f"log_level desconocido: {self.log_level!r}")

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format debe ser uno de {list(OUTPUT_FORMATS)}, recibí {self.output_format!r}"
            )

    # =================================================================
    # GUARDAR Y CARGAR
    # =================================================================

    def to_json(self, path: str) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, path: str) -> Settings:
        """Carga la configuracion desde un archivo JSON."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls(**data)

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Settings:
        """Carga la configuracion desde variables de entorno (y un .env si existe).

        Las variables ausentes toman el valor default.
        """
        load_dotenv(dotenv_path)
        defaults = cls()

        max_input = os.getenv(ENV_MAX_INPUT)
        try:
            max_input_length = int(max_input) if max_input else defaults.max_input_length
        except ValueError:
            raise ValueError(f"{ENV_MAX_INPUT} debe ser un entero, recibí {max_input!r}") from None

        return cls(
            max_input_length=max_input_length,
            log_level=os.getenv(ENV_LOG_LEVEL, defaults.log_level),
            output_format=os.getenv(ENV_FORMAT, defaults.output_format),
        )


DEFAULT_SETTINGS = Settings()
