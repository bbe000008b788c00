"""Recognize the different Japanese scripts and convert between hiragana/katakana."""

from charset import (
    is_full_width_roman_half_width_katakana,
    is_full_width_roman_or_half_width_katakana,
    is_hiragana,
    is_hiragana_string,
    is_japanese,
    is_japanese_character,
    is_japanese_punctuation,
    is_japanese_special_character,
    is_kana,
    is_kana_string,
    is_kanji,
    is_kanji_string,
    is_katakana,
    is_katakana_string,
    is_punctuation,
    is_special_character,
)
from kana_converter import (
    convert_to_vowel_in_stem,
    convert_vowel_in_stem,
    find_row_for_hiragana,
    hiragana_to_katakana,
    hiragana_to_katakana_string,
    katakana_to_hiragana,
    katakana_to_hiragana_string,
    prolonged_hiragana_for_vowel,
    reload_settings,
    vowel_of_hiragana,
)
from kana_table import KanaRow, RowKind
from vowel import Vowel

__all__ = [
    'KanaRow',
    'RowKind',
    'Vowel',
    'convert_to_vowel_in_stem',
    'convert_vowel_in_stem',
    'find_row_for_hiragana',
    'hiragana_to_katakana',
    'hiragana_to_katakana_string',
    'is_full_width_roman_half_width_katakana',
    'is_full_width_roman_or_half_width_katakana',
    'is_hiragana',
    'is_hiragana_string',
    'is_japanese',
    'is_japanese_character',
    'is_japanese_punctuation',
    'is_japanese_special_character',
    'is_kana',
    'is_kana_string',
    'is_kanji',
    'is_kanji_string',
    'is_katakana',
    'is_katakana_string',
    'is_punctuation',
    'is_special_character',
    'katakana_to_hiragana',
    'katakana_to_hiragana_string',
    'prolonged_hiragana_for_vowel',
    'reload_settings',
    'vowel_of_hiragana',
]
