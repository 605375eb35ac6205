from __future__ import annotations
from typing import NamedTuple


class ColorPair(NamedTuple):
    """
    A color as it is spelled in each of the supported color encodings
    """

    #: Palette index (0-7) used by the 8-color "dos" encoding
    dos: int

    #: xterm 256-color index used by the "ansi" encoding
    xterm: int


PATH_BG = ColorPair(4, 237)
PATH_FG = ColorPair(0, 250)
CWD_FG = ColorPair(0, 254)
SEPARATOR_FG = ColorPair(0, 244)

REPO_CLEAN_BG = ColorPair(2, 148)
REPO_CLEAN_FG = ColorPair(0, 0)
REPO_HAS_PENDING_BG = ColorPair(3, 161)
REPO_HAS_PENDING_FG = ColorPair(0, 15)
REPO_HAS_UNSTAGED_BG = ColorPair(1, 161)
REPO_HAS_UNSTAGED_FG = ColorPair(0, 15)

CMD_PASSED_BG = ColorPair(7, 236)
CMD_PASSED_FG = ColorPair(0, 15)
CMD_FAILED_BG = ColorPair(7, 161)
CMD_FAILED_FG = ColorPair(0, 15)

SVN_CHANGES_BG = ColorPair(7, 148)
SVN_CHANGES_FG = ColorPair(0, 22)

VIRTUAL_ENV_BG = ColorPair(7, 35)
VIRTUAL_ENV_FG = ColorPair(0, 22)
