from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol
from .colors import ColorPair


class Shell(Enum):
    """The shells whose prompt syntax we know how to produce"""

    BASH = "bash"
    ZSH = "zsh"


class ColorMode(Enum):
    """
    The supported color encodings.  ``DOS`` uses the eight basic SGR colors;
    ``ANSI`` uses the xterm 256-color palette.
    """

    DOS = "dos"
    ANSI = "ansi"


class GlyphMode(Enum):
    """
    Whether to assume a font patched with the Powerline arrow glyphs
    (``PATCHED``) or to fall back to arrows found in ordinary fonts
    (``COMPATIBLE``)
    """

    COMPATIBLE = "compatible"
    PATCHED = "patched"


@dataclass(frozen=True)
class Glyphs:
    #: Separator drawn between segments of different categories
    separator: str

    #: Separator drawn between breadcrumbs of the same path
    separator_thin: str


GLYPHS = {
    GlyphMode.COMPATIBLE: Glyphs(separator="▶", separator_thin="❯"),
    GlyphMode.PATCHED: Glyphs(separator="\ue0b0", separator_thin="\ue0b1"),
}


class UnsupportedShellError(ValueError):
    """Raised when asked to render for a shell we do not support"""

    def __init__(self, shell: str) -> None:
        super().__init__(shell)
        self.shell = shell

    def __str__(self) -> str:
        return f"shell {self.shell} not supported"


class Renderer(Protocol):
    color_mode: ColorMode

    #: The prompt character to show when there is nothing else to say at the
    #: end of the prompt
    prompt_char: ClassVar[str]

    def foreground(self, pair: ColorPair) -> str: ...

    def background(self, pair: ColorPair) -> str: ...

    def reset(self) -> str: ...

    def escape(self, s: str) -> str: ...


@dataclass
class BaseRenderer(ABC):
    color_mode: ColorMode = ColorMode.ANSI

    @abstractmethod
    def wrap(self, code: str) -> str:
        """
        Wrap the raw escape sequence ``code`` so that the shell does not count
        it towards the width of the prompt
        """
        ...

    def sgr(self, prefix: str, pair: ColorPair) -> str:
        if self.color_mode is ColorMode.DOS:
            return self.wrap(f"[{prefix[0]}{pair.dos}m")
        else:
            return self.wrap(f"[{prefix};5;{pair.xterm}m")

    def foreground(self, pair: ColorPair) -> str:
        """Return the escape sequence for setting the foreground color"""
        return self.sgr("38", pair)

    def background(self, pair: ColorPair) -> str:
        """Return the escape sequence for setting the background color"""
        return self.sgr("48", pair)

    def reset(self) -> str:
        """Return the escape sequence for resetting all colors"""
        return self.wrap("[0m")


class BashRenderer(BaseRenderer):
    """Class for producing color codes for use in Bash's PS1 variable"""

    prompt_char: ClassVar[str] = r"\$"

    def wrap(self, code: str) -> str:
        r"""
        Prefix ``code`` with an escape character and wrap it in ``\[ ... \]``
        so that Bash does not count it towards the width of the prompt
        """
        return rf"\[\e{code}\]"

    def escape(self, s: str) -> str:
        """
        Escape characters in the string ``s`` that have special meaning in a
        PS1 variable
        """
        return s.replace("\\", r"\\")


class ZshRenderer(BaseRenderer):
    """Class for producing color codes for use in zsh's PROMPT variable"""

    prompt_char: ClassVar[str] = "%#"

    def wrap(self, code: str) -> str:
        """
        Prefix ``code`` with an escape character and wrap it in ``%{ ... %}``
        so that zsh does not count it towards the width of the prompt
        """
        return f"%{{\x1B{code}%}}"

    def escape(self, s: str) -> str:
        return s.replace("%", "%%")


RENDERERS: dict[Shell, type[BashRenderer] | type[ZshRenderer]] = {
    Shell.BASH: BashRenderer,
    Shell.ZSH: ZshRenderer,
}


def get_renderer(
    shell: Shell | str, color_mode: ColorMode | str = ColorMode.ANSI
) -> Renderer:
    """
    Construct a renderer for the given shell & color encoding.

    :raises UnsupportedShellError: if ``shell`` is not a supported shell
    """
    try:
        klass = RENDERERS[Shell(shell)]
    except (ValueError, KeyError):
        raise UnsupportedShellError(getattr(shell, "value", shell)) from None
    return klass(color_mode=ColorMode(color_mode))
