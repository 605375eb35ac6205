from __future__ import annotations
from collections.abc import Awaitable, Callable, Sequence
import logging
from pathlib import PurePosixPath
import posixpath
from typing import Protocol
from . import colors
from .colors import ColorPair
from .environment import Environment
from .git import git_status
from .options import Options
from .segment import Segment
from .shells import GLYPHS, GlyphMode, get_renderer
from .svn import svn_status

logger = logging.getLogger(__name__)

#: Stands in for the components elided from the middle of a deep path
ELLIPSIS = "…"

SUPERUSER_SYMBOL = "⚡"
ERROR_SYMBOL = "✘"


class RepoStatus(Protocol):
    def segment(self, powerline: Powerline) -> Segment | None: ...


#: A query for the status of the repository containing a directory.  Returns
#: `None` if the directory is not in a repository of the relevant kind.
RepoProvider = Callable[[PurePosixPath, float], Awaitable["RepoStatus | None"]]

DEFAULT_REPO_PROVIDERS: tuple[RepoProvider, ...] = (git_status, svn_status)


class Powerline:
    """
    Builds the list of segments making up a prompt and renders them.  An
    instance is good for a single prompt.
    """

    def __init__(
        self,
        options: Options | None = None,
        env: Environment | None = None,
        repo_providers: Sequence[RepoProvider] | None = None,
    ) -> None:
        self.options = options if options is not None else Options()
        self.env = env if env is not None else Environment.get()
        self.repo_providers = (
            tuple(repo_providers)
            if repo_providers is not None
            else DEFAULT_REPO_PROVIDERS
        )
        # Raises UnsupportedShellError before any segments exist:
        self.renderer = get_renderer(self.options.shell, self.options.color)
        glyphs = GLYPHS[GlyphMode(self.options.mode)]
        self.separator = glyphs.separator
        self.separator_thin = glyphs.separator_thin
        self.segments: list[Segment] = []

    def segment(
        self,
        content: str,
        fg: ColorPair,
        bg: ColorPair,
        separator: str | None = None,
        separator_fg: ColorPair | None = None,
    ) -> Segment:
        """
        Create a segment that draws with this prompt's renderer and (unless
        told otherwise) the wide separator
        """
        return Segment(
            content=content,
            fg=fg,
            bg=bg,
            separator=separator if separator is not None else self.separator,
            renderer=self.renderer,
            separator_fg=separator_fg,
        )

    async def build(self) -> list[Segment]:
        """
        Run each segment stage in order and return the resulting segments.
        This does not return until the repository status query (if any) has
        completed.
        """
        self.add_virtual_env_segment()
        self.add_cwd_segments()
        await self.add_repo_segment()
        self.add_root_indicator_segment()
        return self.segments

    def draw(self) -> str:
        """
        Render the segments built so far as a complete prompt string, ending
        with a reset of all colors
        """
        nexts: list[Segment | None] = [*self.segments[1:], None]
        return (
            "".join(seg.draw(nxt) for seg, nxt in zip(self.segments, nexts))
            + self.renderer.reset()
        )

    def add_virtual_env_segment(self) -> None:
        # If we're inside a Python virtualenv, show the basename of the
        # virtualenv directory; failing that, show the basename of the active
        # Conda environment (which may be given as a path).
        venv = self.env.env.get("VIRTUAL_ENV") or self.env.env.get(
            "CONDA_DEFAULT_ENV", ""
        )
        name = posixpath.basename(venv.replace("\\", "/").rstrip("/"))
        if not name:
            return
        self.segments.append(
            self.segment(
                f" {self.renderer.escape(name)} ",
                colors.VIRTUAL_ENV_FG,
                colors.VIRTUAL_ENV_BG,
            )
        )

    def add_cwd_segments(self) -> None:
        if not self.options.show_path:
            return
        names = self.env.breadcrumbs()
        depth = self.options.depth
        if depth > 1:
            if len(names) > depth:
                # Keep more of the leading path on deeper settings:
                start = 2 if depth > 4 else 1
                names[start : start + len(names) - depth] = [ELLIPSIS]
            for n in names[:-1]:
                self.segments.append(
                    self.segment(
                        f" {self.renderer.escape(n)} ",
                        colors.PATH_FG,
                        colors.PATH_BG,
                        separator=self.separator_thin,
                        separator_fg=colors.SEPARATOR_FG,
                    )
                )
        self.segments.append(
            self.segment(
                f" {self.renderer.escape(names[-1])} ",
                colors.CWD_FG,
                colors.PATH_BG,
            )
        )

    async def add_repo_segment(self) -> None:
        """
        Ask each repository provider in turn for the status of the working
        directory, and add a segment for the first one that recognizes it
        """
        if not self.options.show_repo:
            return
        for provider in self.repo_providers:
            status = await provider(self.env.cwd, self.options.repo_timeout)
            if status is None:
                continue
            if (seg := status.segment(self)) is not None:
                self.segments.append(seg)
            return
        logger.debug("%s is not in a repository", self.env.cwd)

    def add_root_indicator_segment(self) -> None:
        if not self.options.show_root:
            return
        symbol = ""
        if self.env.is_root:
            symbol += SUPERUSER_SYMBOL
        if self.options.error:
            symbol += ERROR_SYMBOL
        if not symbol:
            symbol = self.renderer.prompt_char
        if self.options.error:
            fg, bg = colors.CMD_FAILED_FG, colors.CMD_FAILED_BG
        else:
            fg, bg = colors.CMD_PASSED_FG, colors.CMD_PASSED_BG
        self.segments.append(self.segment(f" {symbol} ", fg, bg))
