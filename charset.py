"""
Recognize the different Japanese scripts.
Unicode reference: http://www.rikai.com/library/kanjitables/kanji_codes.unicode.shtml
"""

PUNCTUATION_START = '\u3000'
PUNCTUATION_END = '\u303f'
HIRAGANA_START = '\u3040'
HIRAGANA_END = '\u309f'
KATAKANA_START = '\u30a0'
KATAKANA_END = '\u30ff'
KANJI_START = '\u4e00'
KANJI_END = '\u9faf'
FULL_WIDTH_ROMAN_HALF_WIDTH_KATAKANA_START = '\uff00'
FULL_WIDTH_ROMAN_HALF_WIDTH_KATAKANA_END = '\uffef'

KATAKANA_MIDDLE_DOT = '・'
SPECIAL_CHARACTERS = frozenset('々〆')


def is_japanese(ch: str) -> bool:
    """Return True for kana, kanji, Japanese punctuation and full-width forms."""
    return (
        is_hiragana(ch)
        or is_katakana(ch)
        or is_kanji(ch)
        or is_japanese_punctuation(ch)
        or is_full_width_roman_half_width_katakana(ch)
    )


def is_japanese_character(ch: str) -> bool:
    """Return True for kana, kanji and the repetition marks 々 / 〆."""
    return is_hiragana(ch) or is_katakana(ch) or is_kanji(ch) or is_japanese_special_character(ch)


def is_japanese_punctuation(ch: str) -> bool:
    return PUNCTUATION_START <= ch <= PUNCTUATION_END


def is_japanese_special_character(ch: str) -> bool:
    return ch in SPECIAL_CHARACTERS


def is_hiragana(ch: str) -> bool:
    return HIRAGANA_START <= ch <= HIRAGANA_END


def is_katakana(ch: str) -> bool:
    # ・ has no vowel and never takes part in conversion
    return KATAKANA_START <= ch <= KATAKANA_END and ch != KATAKANA_MIDDLE_DOT


def is_kana(ch: str) -> bool:
    return is_hiragana(ch) or is_katakana(ch)


def is_kanji(ch: str) -> bool:
    return KANJI_START <= ch <= KANJI_END


def is_full_width_roman_half_width_katakana(ch: str) -> bool:
    return FULL_WIDTH_ROMAN_HALF_WIDTH_KATAKANA_START <= ch <= FULL_WIDTH_ROMAN_HALF_WIDTH_KATAKANA_END


def is_hiragana_string(text: str) -> bool:
    return all(is_hiragana(ch) for ch in text)


def is_katakana_string(text: str) -> bool:
    return all(is_katakana(ch) for ch in text)


def is_kana_string(text: str) -> bool:
    return all(is_kana(ch) for ch in text)


def is_kanji_string(text: str) -> bool:
    return all(is_kanji(ch) for ch in text)


is_punctuation = is_japanese_punctuation
is_special_character = is_japanese_special_character
is_full_width_roman_or_half_width_katakana = is_full_width_roman_half_width_katakana
