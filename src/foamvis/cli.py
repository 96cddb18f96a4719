"""
Command-line interface for foamvis.

The CLI only parses arguments; ``foamvis.main`` builds the document and the
window from them.
"""
from __future__ import annotations

import argparse
from typing import Optional, Sequence

from foamvis.model.affine_map import AffineMapNames
from foamvis.model.constraint_rotation import ConstraintRotationNames

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def constraint_rotation_arg(text: str) -> ConstraintRotationNames:
    result = ConstraintRotationNames.parse(text)
    if not result.ok:
        raise argparse.ArgumentTypeError(result.message)
    return result.value


def affine_names_arg(text: str) -> AffineMapNames:
    tokens = text.replace(",", " ").split()
    if len(tokens) != 3:
        raise argparse.ArgumentTypeError("--affine needs three parameters.")
    return AffineMapNames.from_names(*tokens)


def variable_arg(text: str) -> tuple[str, float]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got '{text}'.")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Value of '{name}' is not a number: '{value}'.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foamvis",
        description="Interactive foam visualization front-end",
    )
    parser.add_argument(
        "--constraint-rotation",
        type=constraint_rotation_arg,
        default=None,
        metavar='"<constraint> <xName> <yName> <angleName>"',
        help="A constraint that moves (translates and rotates) through foam. "
             "<xName>, <yName> name the DMP parameters storing the center of "
             "rotation and <angleName> the rotation angle in radians.",
    )
    parser.add_argument(
        "--affine",
        type=affine_names_arg,
        default=None,
        metavar='"<xName> <yName> <angleName>"',
        help="DMP parameters storing the position of a foam object.",
    )
    parser.add_argument(
        "--variable",
        type=variable_arg,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Value of a DMP parameter. Repeatable.",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument(
        "--no-gui",
        action="store_true",
        help="Print the resolved parameters and exit",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(None if argv is None else list(argv))
