"""Turn normalised source lines into catalog records."""
from __future__ import annotations

from typing import Optional

from .errors import MalformedLineError
from .schema import IMAGE_SENTINEL, ImagePathEntry, ParsedLine, Record


def parse(normalized_line: str, origin_tag: str, line_no: Optional[int] = None) -> ParsedLine:
    """Parse one source line.

    Plain lines become a record whose display text is the trimmed line.
    ``IMG <path> <tag>`` lines become an ``IMG <tag>`` record plus an
    :class:`ImagePathEntry` pointing the tag at ``path``.
    """

    line = normalized_line.strip()
    if not line:
        raise MalformedLineError(normalized_line, origin_tag, line_no, reason="empty line")

    token, _, remainder = line.partition(" ")
    if token != IMAGE_SENTINEL:
        return ParsedLine(record=Record(display_text=line, origin_tag=origin_tag))

    image_path, _, display_tag = remainder.strip().partition(" ")
    display_tag = display_tag.strip()
    if not image_path or not display_tag:
        raise MalformedLineError(normalized_line, origin_tag, line_no, reason="image line needs a path and a tag")

    return ParsedLine(
        record=Record(display_text=f"{IMAGE_SENTINEL} {display_tag}", origin_tag=origin_tag),
        image=ImagePathEntry(tag=display_tag, path=image_path),
    )
