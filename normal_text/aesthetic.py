"""Fold stylized "fancy text" letters and digits to plain ASCII."""

import unicodedata

from .table import DIGITS, LOWER, UPPER, build_table, zip_alphabet

_LETTERS = UPPER + LOWER

# Mathematical Alphanumeric Symbols: 13 letter styles of 52 codepoints each,
# then dotless i/j, then 5 digit styles of 10.
_MATH_LETTER_STYLES = (
    0x1D400,  # bold
    0x1D434,  # italic
    0x1D468,  # bold italic
    0x1D49C,  # script
    0x1D4D0,  # bold script
    0x1D504,  # fraktur
    0x1D538,  # double-struck
    0x1D56C,  # bold fraktur
    0x1D5A0,  # sans-serif
    0x1D5D4,  # sans-serif bold
    0x1D608,  # sans-serif italic
    0x1D63C,  # sans-serif bold italic
    0x1D670,  # monospace
)
_MATH_DIGIT_STYLES = (0x1D7CE, 0x1D7D8, 0x1D7E2, 0x1D7EC, 0x1D7F6)

_RANGES = (
    tuple((start, _LETTERS) for start in _MATH_LETTER_STYLES)
    + tuple((start, DIGITS) for start in _MATH_DIGIT_STYLES)
    + (
        (0x1D6A4, "ij"),
        # fullwidth
        (0xFF21, UPPER),
        (0xFF41, LOWER),
        (0xFF10, DIGITS),
        # circled, parenthesized
        (0x24B6, UPPER),
        (0x24D0, LOWER),
        (0x249C, LOWER),
        (0x2460, "123456789"),
        (0x24EA, "0"),
        (0x24F5, "123456789"),
        (0x24FF, "0"),
        (0x2776, "123456789"),
        (0x2780, "123456789"),
        (0x278A, "123456789"),
        # squared, negative circled, negative squared
        (0x1F130, UPPER),
        (0x1F150, UPPER),
        (0x1F170, UPPER),
    )
)

# Letterlike Symbols standing in for the reserved holes of the math styles.
_LETTERLIKE = (
    ("B", "ℬ"),
    ("C", "ℂℭ"),
    ("E", "ℰ"),
    ("F", "ℱ"),
    ("H", "ℋℌℍ"),
    ("I", "ℐℑ"),
    ("L", "ℒ"),
    ("M", "ℳ"),
    ("N", "ℕ"),
    ("P", "ℙ"),
    ("Q", "ℚ"),
    ("R", "ℛℜℝ"),
    ("Z", "ℤℨ"),
    ("e", "ℯ"),
    ("g", "ℊ"),
    ("h", "ℎ"),
    ("o", "ℴ"),
)

_LOOKALIKE_ALPHABETS = (
    "ᗩᗷᑕᗪᗴᖴǤᕼᎥᒎᛕᒪᗰᑎᗝᑭɊᖇᔕ丅ᑌᐯᗯ᙭Ƴ乙",
    "ƛƁƇƊЄƑƓӇƖʆƘԼMƝƠƤƢƦƧƬƲƔƜҲƳȤ",
    "ꋫꃃꏸꁕꍟꄘꁍꑛꂑꀭꀗ꒒ꁒꁹꆂꉣꁸ꒓ꌚ꓅ꐇꏝꅐꇓꐟꁴ",
    "ꍏꌃꉓꀸꍟꎇꁅꃅꀤꀭꀘ꒒ꂵꈤꂦꉣꆰꋪꌗ꓄ꀎꃴꅏꊼꌩꁴ",
    "ᎯᏰᏨᎠᎬᎰᎶᎻᎨᏠᏦᏝᎷᏁᎾᏢᏅᏒᏕᎿᏬᏉᏯᎲᎽᏃ",
)

# Marks that fancy-text generators stack on plain letters for effect.
_DECORATIONS = (
    "\u0334",  # tilde overlay
    "\u0335",  # short stroke
    "\u0336",  # long stroke (strikethrough)
    "\u0337",  # short solidus
    "\u0338",  # long solidus
    "\u0332",  # underline
    "\u0333",  # double underline
    "\u0305",  # overline
    "\u0305\u0332",
    "\u0332\u0305",
    "\u0366",  # small o above
    "\u0308\u0324",
    "\u0324\u0308",
)


def _decorated_pairs():
    for base in _LETTERS + DIGITS:
        for decoration in _DECORATIONS:
            yield base + decoration, base
            # NFC form, e.g. a precomposed umlaut followed by the diaeresis below.
            yield unicodedata.normalize("NFC", base + decoration), base


AESTHETIC_TABLE = build_table(
    "aesthetic",
    groups=_LETTERLIKE
    + tuple(pair for glyphs in _LOOKALIKE_ALPHABETS for pair in zip_alphabet(glyphs)),
    pairs=tuple(_decorated_pairs()),
    ranges=_RANGES,
)


def fold(text: str) -> str:
    """Map decorative Unicode letters and digits to Basic Latin."""

    return AESTHETIC_TABLE.apply(text)
