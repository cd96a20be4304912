"""termedit CLI entry point.

Allows running via `python -m termedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .constants import EditorConstants
from .errors import DocumentLoadError, TerminalInitError, UsageError

logger = logging.getLogger(__name__)


def parse_args(args: list[str]) -> Optional[str]:
    """Return the file to open, or None for an empty document.

    Raises:
        UsageError: more than one argument was given
    """
    if len(args) > 1:
        raise UsageError(EditorConstants.USAGE)
    return args[0] if args else None


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    args = sys.argv[1:] if argv is None else argv
    try:
        filename = parse_args(args)
    except UsageError as e:
        print(e)
        return EditorConstants.EXIT_USAGE

    # Lazy import so a usage error never touches the terminal
    from .editor import Editor
    editor = Editor()
    try:
        if filename is not None:
            editor.load_file(filename)
        editor.run()
    except DocumentLoadError as e:
        print(f"termedit: {e}", file=sys.stderr)
        return EditorConstants.EXIT_FAILURE
    except TerminalInitError as e:
        logger.error(f"Terminal initialization failed: {e}")
        print(f"termedit: {e}", file=sys.stderr)
        return EditorConstants.EXIT_FAILURE
    return EditorConstants.EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
