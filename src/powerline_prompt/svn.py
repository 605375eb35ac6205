from __future__ import annotations
from dataclasses import dataclass
import logging
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING
from . import colors
from .util import run

if TYPE_CHECKING:
    from .powerline import Powerline
    from .segment import Segment

logger = logging.getLogger(__name__)

#: The status codes (first column of ``svn status``) that count as a change
CHANGE_CODES = frozenset("ACDIMRX!~")


@dataclass(frozen=True)
class SvnStatus:
    #: The number of changed paths in the working copy, or `None` if ``svn
    #: status`` could not be run
    changes: int | None

    def segment(self, powerline: Powerline) -> Segment | None:
        if not self.changes or self.changes <= 0:
            return None
        return powerline.segment(
            f" {self.changes} ", colors.SVN_CHANGES_FG, colors.SVN_CHANGES_BG
        )


def count_changes(output: str) -> int:
    """
    Count the lines of ``svn status`` output that describe a changed path
    """
    return sum(1 for line in output.splitlines() if line[:1] in CHANGE_CODES)


async def svn_status(
    cwd: str | PathLike[str], timeout: float | None = 3
) -> SvnStatus | None:
    """
    If ``cwd`` is the top of a Subversion working copy (i.e., contains a
    :file:`.svn` directory), return an `SvnStatus`; otherwise, return `None`.
    A failure to run ``svn status`` still produces an `SvnStatus`, just
    without a change count.
    """
    if not (Path(cwd) / ".svn").is_dir():
        logger.debug("No .svn directory in %s; not a Subversion working copy", cwd)
        return None
    out = await run("svn", "status", cwd=cwd, timeout=timeout, strip=False)
    if out is None:
        return SvnStatus(changes=None)
    return SvnStatus(changes=count_changes(out))
