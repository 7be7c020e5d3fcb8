from __future__ import annotations

import pytest

from catalog.errors import MalformedLineError, ParseError
from catalog.parser import parse
from catalog.schema import ImagePathEntry, image_tag


def test_plain_line_is_trimmed_display_text() -> None:
    parsed = parse("  👋 wave  ", "people.csv")
    assert parsed.record.display_text == "👋 wave"
    assert parsed.record.origin_tag == "people.csv"
    assert parsed.image is None


def test_line_without_space_is_a_plain_record() -> None:
    parsed = parse("🦀", "animals.csv")
    assert parsed.record.display_text == "🦀"
    assert parsed.image is None


def test_image_line() -> None:
    parsed = parse("IMG icons/foo.png catface", "images.csv")
    assert parsed.record.display_text == "IMG catface"
    assert parsed.image == ImagePathEntry(tag="catface", path="icons/foo.png")
    assert parsed.record.is_image


def test_image_tag_keeps_inner_spaces() -> None:
    parsed = parse("IMG a.png grumpy cat ", "images.csv")
    assert parsed.record.display_text == "IMG grumpy cat"
    assert parsed.image is not None and parsed.image.tag == "grumpy cat"


def test_img_prefix_inside_word_is_plain() -> None:
    parsed = parse("IMGUR logo", "misc.csv")
    assert parsed.record.display_text == "IMGUR logo"
    assert parsed.image is None


@pytest.mark.parametrize("line", ["IMG", "IMG icons/foo.png", "IMG   ", ""])
def test_malformed_lines(line: str) -> None:
    with pytest.raises(MalformedLineError):
        parse(line, "images.csv", 7)


def test_malformed_error_names_location() -> None:
    with pytest.raises(ParseError, match="images.csv:3"):
        parse("IMG only-path", "images.csv", 3)


def test_image_tag_helper() -> None:
    assert image_tag("IMG catface") == "catface"
    assert image_tag("IMG") is None
    assert image_tag("👋 wave") is None
