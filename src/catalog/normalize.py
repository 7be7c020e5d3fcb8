"""Accent folding for source lines."""
from __future__ import annotations

import unicodedata

# Scripts whose accented letters are folded to their base letter.
FOLDED_SCRIPTS = frozenset({"LATIN", "GREEK", "CYRILLIC"})


def _is_folded_letter(char: str) -> bool:
    if not char.isalpha():
        return False
    return unicodedata.name(char, "").split(" ", 1)[0] in FOLDED_SCRIPTS


def normalize(line: str) -> str:
    """Strip diacritical marks from Latin, Greek and Cyrillic letters.

    ``"ñandú"`` becomes ``"nandu"``. Marks on any other base survive, which
    keeps kaomoji built from free-standing marks, kana with voiced marks
    (``"ガ"``, ``"ゞ"``) and emoji variation selectors untouched.
    """

    decomposed = unicodedata.normalize("NFD", line)
    kept: list[str] = []
    fold_marks = False
    for char in decomposed:
        if unicodedata.combining(char):
            if fold_marks:
                continue
        else:
            fold_marks = _is_folded_letter(char)
        kept.append(char)
    return unicodedata.normalize("NFC", "".join(kept))
