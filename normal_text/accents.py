"""Consolidate accented Latin and Cyrillic letters to unaccented Latin.

Most accented letters collapse to their bare base letter with the case kept.
Ligatures, sharp s, thorn and the German umlauts expand to several letters,
and Cyrillic is transliterated letter by letter.
"""

from .aesthetic import fold
from .table import build_table

_LATIN = (
    ("A", "ÀÁÂÃÅĀĂĄǍǞǠǺȀȂȦȺḀẠẢẤẦẨẪẬẮẰẲẴẶ"),
    ("a", "àáâãåāăąǎǟǡǻȁȃȧⱥḁạảấầẩẫậắằẳẵặẚ"),
    ("B", "ḂḄḆɃ"),
    ("b", "ḃḅḇƀɓ"),
    ("C", "ÇĆĈĊČḈȻ"),
    ("c", "çćĉċčḉȼ"),
    ("D", "ÐĎĐḊḌḎḐḒ"),
    ("d", "ðďđḋḍḏḑḓ"),
    ("E", "ÈÉÊËĒĔĖĘĚȄȆȨḔḖḘḚḜẸẺẼẾỀỂỄỆ"),
    ("e", "èéêëēĕėęěȅȇȩḕḗḙḛḝẹẻẽếềểễệ"),
    ("F", "Ḟ"),
    ("f", "ḟƒ"),
    ("G", "ĜĞĠĢǦǴḠ"),
    ("g", "ĝğġģǧǵḡ"),
    ("H", "ĤĦȞḢḤḦḨḪ"),
    ("h", "ĥħȟḣḥḧḩḫẖ"),
    ("I", "ÌÍÎÏĨĪĬĮİǏȈȊḬḮỈỊ"),
    ("i", "ìíîïĩīĭįıǐȉȋḭḯỉị"),
    ("J", "Ĵ"),
    ("j", "ĵǰ"),
    ("K", "ĶǨḰḲḴ"),
    ("k", "ķǩḱḳḵ"),
    ("L", "ĹĻĽĿŁḶḸḺḼȽ"),
    ("l", "ĺļľŀłḷḹḻḽƚ"),
    ("M", "ḾṀṂ"),
    ("m", "ḿṁṃ"),
    ("N", "ÑŃŅŇǸṄṆṈṊ"),
    ("n", "ñńņňŉǹṅṇṉṋ"),
    ("O", "ÒÓÔÕØŌŎŐƠǑǪǬǾȌȎȪȬȮȰṌṎṐṒỌỎỐỒỔỖỘỚỜỞỠỢ"),
    ("o", "òóôõøōŏőơǒǫǭǿȍȏȫȭȯȱṍṏṑṓọỏốồổỗộớờởỡợ"),
    ("P", "ṔṖ"),
    ("p", "ṕṗ"),
    ("R", "ŔŖŘȐȒṘṚṜṞɌ"),
    ("r", "ŕŗřȑȓṙṛṝṟɍ"),
    ("S", "ŚŜŞŠȘṠṢṤṦṨ"),
    ("s", "śŝşšșſṡṣṥṧṩẛ"),
    ("T", "ŢŤŦȚṪṬṮṰȾ"),
    ("t", "ţťŧțṫṭṯṱẗ"),
    ("U", "ÙÚÛŨŪŬŮŰŲƯǓǕǗǙǛȔȖṲṴṶṸṺỤỦỨỪỬỮỰɄ"),
    ("u", "ùúûũūŭůűųưǔǖǘǚǜȕȗṳṵṷṹṻụủứừửữựʉ"),
    ("V", "ṼṾ"),
    ("v", "ṽṿ"),
    ("W", "ŴẀẂẄẆẈ"),
    ("w", "ŵẁẃẅẇẉẘ"),
    ("X", "ẊẌ"),
    ("x", "ẋẍ"),
    ("Y", "ÝŶŸȲẎỲỴỶỸɎ"),
    ("y", "ýÿŷȳẏẙỳỵỷỹɏ"),
    ("Z", "ŹŻŽẐẒẔ"),
    ("z", "źżžẑẓẕ"),
)

_EXPANSIONS = (
    ("Ae", "Ä"),
    ("ae", "äæǽǣ"),
    ("Oe", "Ö"),
    ("oe", "öœ"),
    ("Ue", "Ü"),
    ("ue", "ü"),
    ("AE", "ÆǼǢ"),
    ("OE", "Œ"),
    ("ss", "ß"),
    ("SS", "ẞ"),
    ("Th", "Þ"),
    ("th", "þ"),
    ("IJ", "Ĳ"),
    ("ij", "ĳ"),
    ("DZ", "ǄǱ"),
    ("Dz", "ǅǲ"),
    ("dz", "ǆǳ"),
    ("LJ", "Ǉ"),
    ("Lj", "ǈ"),
    ("lj", "ǉ"),
    ("NJ", "Ǌ"),
    ("Nj", "ǋ"),
    ("nj", "ǌ"),
    ("AA", "Ꜳ"),
    ("aa", "ꜳ"),
    ("AO", "Ꜵ"),
    ("ao", "ꜵ"),
    ("AU", "Ꜷ"),
    ("au", "ꜷ"),
    ("AV", "ꜸꜺ"),
    ("av", "ꜹꜻ"),
    ("AY", "Ꜽ"),
    ("ay", "ꜽ"),
    ("OO", "Ꝏ"),
    ("oo", "ꝏ"),
    ("OU", "Ȣ"),
    ("ou", "ȣ"),
    ("TZ", "Ꜩ"),
    ("tz", "ꜩ"),
    ("VY", "Ꝡ"),
    ("vy", "ꝡ"),
    ("hv", "ƕ"),
    ("ff", "ﬀ"),
    ("fi", "ﬁ"),
    ("fl", "ﬂ"),
    ("ffi", "ﬃ"),
    ("ffl", "ﬄ"),
    ("st", "ﬅﬆ"),
)

# Uppercase А is left as is.
_CYRILLIC = (
    ("Yo", "Ё"),
    ("yo", "ё"),
    ("I", "ЙЫИІ"),
    ("i", "йыиі"),
    ("TS", "Ц"),
    ("ts", "ц"),
    ("U", "УЎ"),
    ("u", "уў"),
    ("K", "К"),
    ("k", "к"),
    ("E", "ЕЭ"),
    ("e", "еэ"),
    ("N", "Н"),
    ("n", "н"),
    ("G", "ГҐ"),
    ("g", "гґ"),
    ("Sh", "Ш"),
    ("sh", "ш"),
    ("Sch", "Щ"),
    ("sch", "щ"),
    ("Z", "З"),
    ("z", "з"),
    ("H", "Х"),
    ("h", "х"),
    ("'", "ЪЬъь"),
    ("F", "Ф"),
    ("f", "ф"),
    ("V", "В"),
    ("v", "в"),
    ("a", "а"),
    ("P", "П"),
    ("p", "п"),
    ("R", "Р"),
    ("r", "р"),
    ("O", "О"),
    ("o", "о"),
    ("L", "Л"),
    ("l", "л"),
    ("D", "Д"),
    ("d", "д"),
    ("Zh", "Ж"),
    ("zh", "ж"),
    ("Ya", "Я"),
    ("ya", "я"),
    ("Ch", "Ч"),
    ("ch", "ч"),
    ("S", "С"),
    ("s", "с"),
    ("M", "М"),
    ("m", "м"),
    ("T", "Т"),
    ("t", "т"),
    ("B", "Б"),
    ("b", "б"),
    ("Yu", "Ю"),
    ("yu", "ю"),
    ("Yi", "Ї"),
    ("yi", "ї"),
    ("ye", "є"),
)

# Combining mark -> ASCII bases that fold to the bare letter when the mark
# follows them as a separate codepoint.
_DECOMPOSED = {
    "\u0300": "AEINOUWYaeinouwy",
    "\u0301": "ACEGIKLMNOPRSUWXYZacegiklmnoprsuwxyz",
    "\u0302": "ACEGHIJOSUWYZaceghijosuwyz",
    "\u0303": "AEINOUVYaeinouvy",
    "\u0304": "AEGIOUYaegiouy",
    "\u0306": "AEGIOUaegiou",
    "\u0307": "ABCDEFGHIMNPRSTWXYZabcdefghmnprstwxyz",
    "\u0308": "EHIWXYehitwxy",
    "\u030A": "AUauwy",
    "\u030B": "AEIOUaeiou",
    "\u030C": "ACDEGHIKLNORSTUZacdeghiklnorstuz",
    "\u0323": "ABDEHIKLMNORSTUVWYZabdehiklmnorstuvwyz",
    "\u0327": "ABCDEGHIKLMNOQRSTUXZabcdeghiklmnoqrstuxz",
    "\u0328": "AEIOUaeiou",
}

_UMLAUTS = {"A": "Ae", "O": "Oe", "U": "Ue", "a": "ae", "o": "oe", "u": "ue"}

_GRAPHEMES = (
    ("Č\u0323", "C"),
    ("č\u0323", "c"),
    ("Ê\u030C", "E"),
    ("ê\u030C", "e"),
    ("Ř\u0329", "R"),
    ("ř\u0329", "r"),
    ("Ɛ\u0327", "E"),
    ("ɛ\u0327", "e"),
    ("Ɨ\u0327", "I"),
    ("ɨ\u0327", "i"),
)


def _decomposed_pairs():
    for mark, bases in _DECOMPOSED.items():
        for base in bases:
            yield base + mark, base
    for base, expansion in _UMLAUTS.items():
        yield base + "\u0308", expansion


ACCENT_TABLE = build_table(
    "accents",
    groups=_LATIN + _EXPANSIONS + _CYRILLIC,
    pairs=tuple(_decomposed_pairs()) + _GRAPHEMES,
)


def consolidate(text: str) -> str:
    """Replace accented letters, ligatures and Cyrillic with plain Latin."""

    return ACCENT_TABLE.apply(text, rescan=_settle)


def _settle(tail: str) -> str:
    # Marks left behind by a replacement may still be decorations.
    return consolidate(fold(tail))
