"""Normalization pipeline: fold, consolidate, strip."""

from .accents import consolidate
from .aesthetic import fold
from .diacritics import strip
from .types import NormalizationTrace


def normalize(text: str) -> str:
    """Return text with decorative, accented and Cyrillic letters folded to ASCII."""

    return strip(consolidate(fold(text)))


def trace(text: str) -> NormalizationTrace:
    """Run the pipeline and keep the output of each stage."""

    folded = fold(text)
    consolidated = consolidate(folded)
    return NormalizationTrace(
        original=text,
        folded=folded,
        consolidated=consolidated,
        normalized=strip(consolidated),
    )
