"""Static mapping tables and the greedy grapheme scanner shared by all stages."""

from dataclasses import dataclass
import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple
import unicodedata

logger = logging.getLogger(__name__)

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"


class TableError(ValueError):
    """Raised when a mapping table definition is inconsistent."""

    pass


def is_mark(ch: str) -> bool:
    """Return True for combining marks (Mn, Mc, Me)."""

    return unicodedata.category(ch).startswith("M")


@dataclass(frozen=True)
class MappingTable:
    """Read-only source key to replacement mapping for one stage."""

    name: str
    entries: Mapping[str, str]
    max_key_length: int

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def lookup(self, key: str) -> Optional[str]:
        """Return the replacement for an exact key, or None."""

        return self.entries.get(key)

    def apply(self, text: str, rescan: Optional[Callable[[str], str]] = None) -> str:
        """Replace every tabled grapheme prefix, longest match first.

        A cluster is looked up as written and, when that leaves marks
        unmatched, in its NFC form. Marks left over after a prefix match are
        passed to ``rescan`` together with the last replacement character
        (defaults to this table).
        """

        if rescan is None:
            rescan = self.apply
        out = []
        i = 0
        n = len(text)
        while i < n:
            end = i + 1
            while end < n and is_mark(text[end]):
                end += 1
            cluster = text[i:end]
            match = self._match(cluster)
            if end - i > 1 and (match is None or match[0] < len(cluster)):
                composed = unicodedata.normalize("NFC", cluster)
                if composed != cluster:
                    composed_match = self._match(composed)
                    if composed_match is not None:
                        cluster, match = composed, composed_match
            if match is None:
                out.append(text[i])
                i += 1
                continue
            length, replacement = match
            rest = cluster[length:]
            if rest and replacement:
                out.append(replacement[:-1])
                out.append(rescan(replacement[-1] + rest))
            else:
                out.append(replacement + rest)
            i = end
        return "".join(out)

    def _match(self, cluster: str) -> Optional[Tuple[int, str]]:
        length = min(len(cluster), self.max_key_length)
        while length > 0:
            replacement = self.entries.get(cluster[:length])
            if replacement is not None:
                return length, replacement
            length -= 1
        return None


def build_table(
    name: str,
    groups: Iterable[Tuple[str, str]] = (),
    pairs: Iterable[Tuple[str, str]] = (),
    ranges: Iterable[Tuple[int, str]] = (),
) -> MappingTable:
    """Build a MappingTable from grouped, explicit and ranged entries.

    ``groups`` holds ``(replacement, chars)`` where every char maps to the
    replacement. ``pairs`` holds explicit ``(key, replacement)`` entries and
    is the only way to declare multi-codepoint keys. ``ranges`` holds
    ``(first_codepoint, alphabet)`` where consecutive codepoints map to
    consecutive alphabet characters.
    """

    entries: Dict[str, str] = {}
    for replacement, chars in groups:
        for ch in chars:
            _add_entry(entries, name, ch, replacement)
    for key, replacement in pairs:
        _add_entry(entries, name, key, replacement)
    for first, alphabet in ranges:
        for offset, replacement in enumerate(alphabet):
            _add_entry(entries, name, chr(first + offset), replacement)

    max_key_length = max((len(key) for key in entries), default=1)
    logger.debug("built %s table: %d entries, longest key %d", name, len(entries), max_key_length)
    return MappingTable(
        name=name,
        entries=MappingProxyType(entries),
        max_key_length=max_key_length,
    )


def zip_alphabet(glyphs: str, alphabet: str = UPPER) -> Tuple[Tuple[str, str], ...]:
    """Pair a look-alike alphabet with the letters it imitates."""

    if len(glyphs) != len(alphabet):
        raise TableError(
            f"look-alike alphabet has {len(glyphs)} glyphs, expected {len(alphabet)}"
        )
    return tuple((letter, glyph) for glyph, letter in zip(glyphs, alphabet))


def _add_entry(entries: Dict[str, str], name: str, key: str, replacement: str) -> None:
    """Insert one entry, rejecting empty keys and conflicting duplicates."""

    if not isinstance(key, str) or not key:
        raise TableError(f"{name}: keys must be non-empty strings")
    if not isinstance(replacement, str):
        raise TableError(f"{name}: replacement for {key!r} must be a string")
    if key == replacement:
        return
    existing = entries.get(key)
    if existing is not None and existing != replacement:
        raise TableError(
            f"{name}: {key!r} maps to both {existing!r} and {replacement!r}"
        )
    entries[key] = replacement
