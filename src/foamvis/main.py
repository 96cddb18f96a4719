"""
Application Initialization
==========================
Builds the document from the command line, the Store around it and the
Main Window, then starts the Qt Event Loop.

It acts as the "Dependency Injection" root: the document is created here and
passed down explicitly; nothing else creates one.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from foamvis.cli import parse_args
from foamvis.controller.store import Store
from foamvis.logging_config import setup_logging
from foamvis.model.document import FoamDocument, cube_edges
from foamvis.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def build_document(args: argparse.Namespace) -> FoamDocument:
    """Creates the document described by the parsed command line."""
    document = FoamDocument(name="Sample foam", edges=cube_edges())
    if args.affine is not None:
        document.affine_names = args.affine
    if args.constraint_rotation is not None:
        document.constraint_rotation_names = args.constraint_rotation

    if args.variable:
        for result in document.set_variables(dict(args.variable)):
            if not result.ok:
                logger.warning(result.message)
    return document


def describe(document: FoamDocument) -> str:
    lines = [f"{document.name}: {len(document.edges)} edges"]
    if document.affine_map is not None:
        a = document.affine_map
        lines.append(f"affine map: x={a.x:g} y={a.y:g} angle={a.angle:g}")
    if document.constraint_rotation is not None:
        r = document.constraint_rotation
        lines.append(
            f"constraint {r.constraint_index}: center=({r.center.x:g}, {r.center.y:g}) angle={r.angle:g}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    document = build_document(args)

    if args.no_gui:
        print(describe(document))
        return 0

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("FoamVis")

    store = Store(document)
    window = MainWindow(store)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
