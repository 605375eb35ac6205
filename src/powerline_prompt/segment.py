from __future__ import annotations
from dataclasses import dataclass, field
from .colors import ColorPair
from .shells import Renderer


@dataclass(frozen=True)
class Segment:
    """One colored block of prompt text followed by a separator glyph"""

    #: The text shown inside the segment, padding included
    content: str

    fg: ColorPair
    bg: ColorPair

    #: The glyph drawn after the segment
    separator: str

    renderer: Renderer = field(compare=False, repr=False)

    #: The color the separator is drawn in.  Defaults to ``bg`` so that the
    #: separator looks like the tip of this segment.
    separator_fg: ColorPair | None = None

    def __post_init__(self) -> None:
        if self.separator_fg is None:
            object.__setattr__(self, "separator_fg", self.bg)

    def draw(self, next_segment: Segment | None = None) -> str:
        """
        Render the segment followed by its separator.  The separator is drawn
        on top of the background of ``next_segment``, or on the terminal's
        default background if this is the last segment.
        """
        r = self.renderer
        if next_segment is not None:
            transition = r.background(next_segment.bg)
        else:
            transition = r.reset()
        assert self.separator_fg is not None
        return (
            r.foreground(self.fg)
            + r.background(self.bg)
            + self.content
            + transition
            + r.foreground(self.separator_fg)
            + self.separator
        )
