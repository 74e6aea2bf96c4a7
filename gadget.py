"""Command line entrypoint for rendering or serving a gadget document."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from webgadgets.config import load_settings
from webgadgets.layout import gadget_from_document
from webgadgets.logging_config import configure_logging
from webgadgets.models import GadgetDocument
from webgadgets.page import render_page

_LOGGER = logging.getLogger("gadget")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render or serve a gadget described in JSON")
    parser.add_argument("document", type=Path, help="Path to the gadget JSON document.")
    parser.add_argument("--config", type=Path, help="Settings file (default: configs/gadget.json).")
    parser.add_argument("--log-level", help="Python logging level (default from settings: INFO)")
    parser.add_argument("-o", "--output", type=Path, help="Write the rendered page here instead of stdout.")
    parser.add_argument("--selected", help="Override the initially selected tab value.")
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Serve the gadget and print the JSON result posted by its Done button.",
    )
    parser.add_argument("--host", help="Interface to bind when serving.")
    parser.add_argument("--port", type=int, help="Port to bind when serving (0 picks a free port).")
    parser.add_argument(
        "--viewer",
        choices=["pane", "dialog", "browser"],
        help="Where to display the served gadget.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    settings = load_settings(args.config)
    if args.viewer:
        settings.viewer = args.viewer
    configure_logging(level=args.log_level or settings.log_level)

    try:
        document = GadgetDocument.model_validate_json(args.document.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        _LOGGER.error("Unable to load gadget document %s: %s", args.document, exc)
        return 2

    if args.selected:
        document = document.model_copy(update={"selected": args.selected})

    ui = gadget_from_document(document, theme=settings.theme)

    if args.serve:
        from webgadgets.server import run_gadget

        result = run_gadget(
            ui,
            host=args.host,
            port=args.port,
            title=document.title,
            settings=settings,
        )
        print(json.dumps(result))
        return 0

    html = render_page(ui)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(html, encoding="utf-8")
        _LOGGER.info("Wrote %s", args.output)
    else:
        sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
