from __future__ import annotations

from collections.abc import Iterator

from PySubRip.SubRipSubtitle import SubRipSubtitle

class SubRipData:
    """
    Ordered container for the subtitles of one SRT document.

    Attributes:
        subtitles (list[SubRipSubtitle]): subtitles in the order they appeared in the source (or were added)
    """

    def __init__(self, subtitles : list[SubRipSubtitle]|None = None):
        self.subtitles : list[SubRipSubtitle] = list(subtitles) if subtitles else []

    @property
    def last(self) -> SubRipSubtitle|None:
        return self.subtitles[-1] if self.subtitles else None

    def AddSubtitle(self, subtitle : SubRipSubtitle) -> None:
        self.subtitles.append(subtitle)

    def __len__(self) -> int:
        return len(self.subtitles)

    def __iter__(self) -> Iterator[SubRipSubtitle]:
        return iter(self.subtitles)

    def __getitem__(self, index : int) -> SubRipSubtitle:
        return self.subtitles[index]

    def __str__(self) -> str:
        from PySubRip.SubRipComposer import SubRipComposer
        return SubRipComposer().Compose(self)

    def __repr__(self) -> str:
        return f"SubRipData({len(self.subtitles)} subtitles)"
