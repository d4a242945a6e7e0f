"""Second diacritic pass: residual letters that fold to one plain letter."""

from .accents import consolidate
from .aesthetic import fold
from .table import build_table

_RESIDUAL = (
    ("0", "߀"),
    ("A", "ᴀⱯ"),
    ("a", "ɑɐ"),
    ("B", "ʙƂ"),
    ("b", "ƃ"),
    ("C", "ᴄꜾ"),
    ("c", "ƈꜿↄ"),
    ("D", "ᴅƉƋꝹ"),
    ("d", "Ꮷԁɖɗƌ"),
    ("E", "ᴇƎƐɆ"),
    ("e", "ɛǝɇ"),
    ("F", "ꜰꝻ"),
    ("f", "ꝼ"),
    ("G", "ɢꞠꝽꝾ"),
    ("g", "ǥɠꞡꝿᵹ"),
    ("H", "ʜⱧⱵꞍ"),
    ("h", "ⱨⱶɥ"),
    ("I", "ɪƗ"),
    ("i", "ɨ"),
    ("J", "ȷᴊɈ"),
    ("j", "ɉ"),
    ("K", "ᴋⱩꝀꝂꝄꞢ"),
    ("k", "ƙⱪꝁꝃꝅꞣ"),
    ("L", "ʟⱢⱠꝈꝆꞀ"),
    ("l", "ɭɫⱡꝉꞁꝇ"),
    ("M", "ᴍⱮϻ"),
    ("m", "ɱɯ"),
    ("N", "ɴᴎȠꞐꞤ"),
    ("n", "ƞɲꞑꞥԉ"),
    ("O", "ᴏƆƟꝊꝌ"),
    ("o", "ᴑɵɔꝋꝍ"),
    ("P", "ᴘⱣꝐꝒꝔ"),
    ("p", "ρƥᵽꝑꝓꝕ"),
    ("Q", "ꝖꝘ"),
    ("q", "ɋꝗꝙ"),
    ("R", "ʀⱤꝚꞦꞂ"),
    ("r", "ɽꝛꞧꞃ"),
    ("S", "ꜱⱾꞨꞄ"),
    ("s", "ѕʂȿꞩꞅ"),
    ("T", "ᴛƮꞆ"),
    ("t", "ƭʈⱦꞇ"),
    ("U", "ᴜ"),
    ("V", "ᴠꝞɅ"),
    ("v", "ʋꝟʌ"),
    ("W", "ᴡⱲ"),
    ("w", "ⱳ"),
    ("Y", "ʏỾ"),
    ("y", "ƴỿ"),
    ("Z", "ᴢƵⱿⱫꝢ"),
    ("z", "ƶȥɀⱬꝣ"),
    ("E", "Ѐ"),
    ("e", "ѐ"),
    ("I", "Ѝ"),
    ("i", "ѝ"),
    # Ѓ and Ќ keep their Cyrillic base.
    ("Г", "Ѓ"),
    ("г", "ѓ"),
    ("К", "Ќ"),
    ("к", "ќ"),
)

# Consonants carrying a breve or caron as a separate mark.
_MARKED_CONSONANTS = {
    "\u0306": "CKMNPRTVXYckmnprtvxy",
    "\u030C": "BFJMPQVWXYbfjmpqvwxy",
}


def _marked_pairs():
    for mark, bases in _MARKED_CONSONANTS.items():
        for base in bases:
            yield base + mark, base


DIACRITIC_TABLE = build_table(
    "diacritics",
    groups=_RESIDUAL,
    pairs=tuple(_marked_pairs()),
)


def strip(text: str) -> str:
    """Fold residual diacritic and look-alike letters to single letters."""

    return DIACRITIC_TABLE.apply(text, rescan=_settle)


def _settle(tail: str) -> str:
    return strip(consolidate(fold(tail)))
