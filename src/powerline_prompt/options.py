from __future__ import annotations
import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from . import __version__
from .shells import ColorMode, GlyphMode, Shell


@dataclass(frozen=True)
class Options:
    shell: Shell = Shell.ZSH
    color: ColorMode = ColorMode.ANSI
    mode: GlyphMode = GlyphMode.PATCHED

    #: Maximum number of breadcrumbs to show for the working directory
    depth: int = 3

    show_path: bool = True
    show_repo: bool = True
    show_root: bool = True

    #: `True` iff the previous command failed
    error: bool = False

    #: Give up on a repository status query after this many seconds
    repo_timeout: float = 3

    #: Branch name shown without the non-default-branch marker
    default_branch: str = "master"

    debug: bool = False


def positive_int(s: str) -> int:
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f"{s!r} is not a positive integer")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="powerline-prompt",
        description="Powerline-style prompt for bash & zsh",
    )
    parser.add_argument(
        "--shell",
        type=Shell,
        choices=list(Shell),
        default=Shell.ZSH,
        metavar="{" + ",".join(s.value for s in Shell) + "}",
        help="Format prompt for the given shell  [default: zsh]",
    )
    parser.add_argument(
        "--color",
        type=ColorMode,
        choices=list(ColorMode),
        default=ColorMode.ANSI,
        metavar="{" + ",".join(c.value for c in ColorMode) + "}",
        help="Use 256-color (ansi) or 8-color (dos) codes  [default: ansi]",
    )
    parser.add_argument(
        "--mode",
        type=GlyphMode,
        choices=list(GlyphMode),
        default=GlyphMode.PATCHED,
        metavar="{" + ",".join(m.value for m in GlyphMode) + "}",
        help=(
            "Use the arrow glyphs of Powerline-patched fonts or plain Unicode"
            " arrows  [default: patched]"
        ),
    )
    parser.add_argument(
        "--depth",
        type=positive_int,
        default=3,
        metavar="N",
        help="Show at most N components of the current directory  [default: 3]",
    )
    parser.add_argument(
        "--repo-only",
        action="store_true",
        help="Only output the repository status segment",
    )
    parser.add_argument(
        "--no-path",
        dest="show_path",
        action="store_false",
        help="Do not show the current directory",
    )
    parser.add_argument(
        "--no-repo",
        dest="show_repo",
        action="store_false",
        help="Do not show the repository status",
    )
    parser.add_argument(
        "--no-root",
        dest="show_root",
        action="store_false",
        help="Do not show the root/error indicator",
    )
    parser.add_argument(
        "--repo-timeout",
        type=float,
        metavar="SECONDS",
        default=3,
        help=(
            "Skip the repository status if querying it takes longer than this"
            "  [default: 3]"
        ),
    )
    parser.add_argument(
        "--default-branch",
        default="master",
        metavar="NAME",
        help="Branch to show without a branch marker  [default: master]",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debugging information to stderr",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "exit_status",
        nargs="?",
        help="Exit status of the previous command; anything but 0 is an error",
    )
    return parser


def parse_options(argv: Sequence[str] | None = None) -> Options:
    args = build_parser().parse_args(argv)
    show_path = args.show_path
    show_repo = args.show_repo
    show_root = args.show_root
    if args.repo_only:
        show_path = show_root = False
        show_repo = True
    return Options(
        shell=args.shell,
        color=args.color,
        mode=args.mode,
        depth=args.depth,
        show_path=show_path,
        show_repo=show_repo,
        show_root=show_root,
        error=args.exit_status is not None and args.exit_status != "0",
        repo_timeout=args.repo_timeout,
        default_branch=args.default_branch,
        debug=args.debug,
    )
