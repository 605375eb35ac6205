from __future__ import annotations
import asyncio
from collections.abc import Sequence
import logging
import sys
from .environment import Environment
from .options import parse_options
from .powerline import Powerline
from .shells import UnsupportedShellError


def main(argv: Sequence[str] | None = None) -> None:
    options = parse_options(argv)
    if options.debug:
        logging.basicConfig(
            format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            level=logging.DEBUG,
        )
    try:
        powerline = Powerline(options, Environment.get())
    except UnsupportedShellError as e:
        sys.exit(str(e))
    asyncio.run(powerline.build())
    sys.stdout.write(powerline.draw())


if __name__ == "__main__":
    main()
