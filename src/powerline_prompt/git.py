from __future__ import annotations
from dataclasses import dataclass
import logging
from os import PathLike
import re
from typing import TYPE_CHECKING
from . import colors
from .util import run

if TYPE_CHECKING:
    from .powerline import Powerline
    from .segment import Segment

logger = logging.getLogger(__name__)

#: Shown in front of the branch name when it is not the default branch
BRANCH_MARKER = "⭠ "

HEADER_RGX = re.compile(
    r"""
    \#\#\s*(?:(?:Initial\ commit|No\ commits\ yet)\ on\ )?
    (?P<branch>(?:[^\s.]|\.(?!\.))+)
    """,
    flags=re.X,
)


@dataclass(frozen=True)
class GitStatus:
    #: The name of the current branch, as reported in the header of ``git
    #: status --branch``
    branch: str

    #: The number of commits by which ``HEAD`` is ahead of its upstream, or
    #: `None` if ``git status`` did not report it
    ahead: int | None = None

    #: The number of commits by which ``HEAD`` is behind its upstream, or
    #: `None` if ``git status`` did not report it
    behind: int | None = None

    #: `True` iff there are changes staged to be committed
    pending: bool = False

    #: `True` iff there are changes in the working tree that are not staged
    unstaged: bool = False

    @classmethod
    def parse(cls, output: str) -> GitStatus:
        """
        Parse the output of ``git status --short --branch --porcelain``.
        Unrecognized bits of the header are ignored.
        """
        header, *lines = output.strip().splitlines()
        header = header.strip()
        if m := HEADER_RGX.match(header):
            branch = m["branch"]
        else:
            branch = header.removeprefix("##").strip()
        ahead: int | None = None
        behind: int | None = None
        if m := re.search(r"ahead\s+(\d+)", header):
            ahead = int(m[1])
        if m := re.search(r"behind\s+(\d+)", header):
            behind = int(m[1])
        pending = False
        unstaged = False
        for line in lines:
            x, y = line[:2].ljust(2)
            if x != " ":
                pending = True
            if y != " ":
                unstaged = True
            if pending and unstaged:
                break
        return cls(
            branch=branch,
            ahead=ahead,
            behind=behind,
            pending=pending,
            unstaged=unstaged,
        )

    @property
    def color_pairs(self) -> tuple[colors.ColorPair, colors.ColorPair]:
        """The ``(foreground, background)`` pair for the status segment"""
        if self.unstaged:
            return (colors.REPO_HAS_UNSTAGED_FG, colors.REPO_HAS_UNSTAGED_BG)
        elif self.pending:
            return (colors.REPO_HAS_PENDING_FG, colors.REPO_HAS_PENDING_BG)
        else:
            return (colors.REPO_CLEAN_FG, colors.REPO_CLEAN_BG)

    def display(self, default_branch: str = "master") -> str:
        p = self.branch
        if p != default_branch:
            p = BRANCH_MARKER + p
        if self.ahead:
            p += f"+{self.ahead}"
        if self.behind:
            p += f"-{self.behind}"
        return p

    def segment(self, powerline: Powerline) -> Segment:
        fg, bg = self.color_pairs
        text = powerline.renderer.escape(
            self.display(powerline.options.default_branch)
        )
        return powerline.segment(f" {text} ", fg, bg)


async def git_status(
    cwd: str | PathLike[str] | None = None, timeout: float | None = 3
) -> GitStatus | None:
    """
    If ``cwd`` is in a Git repository, return a `GitStatus` describing the
    current branch and the state of the working tree.  If it is not, or if
    Git is not installed, or if ``git status`` runs longer than ``timeout``
    seconds, return `None`.
    """
    out = await run(
        "git",
        "status",
        "--short",
        "--branch",
        "--ignore-submodules",
        "--porcelain",
        cwd=cwd,
        timeout=timeout,
    )
    if not out:
        logger.debug("No usable output from git status; not a Git repository")
        return None
    return GitStatus.parse(out)
