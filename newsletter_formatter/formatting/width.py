from __future__ import annotations

# Column widths as rendered by common Japanese mail fonts. This is not
# unicodedata.east_asian_width: several Latin-1 symbols are drawn wide.

_WIDE_RANGES: tuple[tuple[int, int], ...] = (
    (0x3000, 0x9FFF),  # CJK symbols, kana, unified ideographs
    (0xFF00, 0xFFEF),  # fullwidth forms, halfwidth katakana
    (0x20000, 0x2A6DF),  # extension B
    (0x2A700, 0x2B73F),  # extension C
    (0x2B740, 0x2B81F),  # extension D
    (0x2B820, 0x2CEAF),  # extension E
    (0x2CEB0, 0x2EBEF),  # extension F
    (0xF900, 0xFAFF),  # compatibility ideographs
    (0x2500, 0x257F),  # box drawing
)

_WIDE_SYMBOLS = frozenset(
    {
        0x00A1,  # ¡
        0x00A4,  # ¤
        0x00A7,  # §
        0x00A8,  # ¨
        0x00AA,  # ª
        0x00AD,  # soft hyphen
        0x00AE,  # ®
        0x00B0,  # °
        0x00B1,  # ±
        0x00B4,  # ´
        0x00B6,  # ¶
        0x00B7,  # ·
        0x00B8,  # ¸
        0x00BA,  # º
        0x00BC,  # ¼
        0x00BD,  # ½
        0x00BE,  # ¾
        0x00BF,  # ¿
        0x00C6,  # Æ
        0x00D0,  # Ð
        0x00D7,  # ×
        0x00D8,  # Ø
        0x00DE,  # Þ
        0x00DF,  # ß
        0x00E6,  # æ
        0x00E7,  # ç
        0x00F0,  # ð
        0x00F7,  # ÷
        0x00F8,  # ø
        0x00FE,  # þ
        0x0153,  # œ
        0x0132,  # Ĳ
    }
)


def is_wide(char: str) -> bool:
    """Return True when `char` occupies two columns in a fixed-width mail view.

    Only the first code point is inspected. Lone surrogates and the empty
    string are narrow.
    """

    if not char:
        return False
    code = ord(char[0])
    if code in _WIDE_SYMBOLS:
        return True
    return any(lo <= code <= hi for lo, hi in _WIDE_RANGES)


def char_width(char: str) -> int:
    return 2 if is_wide(char) else 1


def text_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)
