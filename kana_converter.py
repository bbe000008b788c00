"""
Convert between hiragana and katakana.

Katakana -> hiragana string conversion spells the prolonged-sound mark (ー)
out as the vowel it extends: キョービ -> きょうび, チームワーク -> ちいむわあく.
"""

from functools import lru_cache
from typing import Any

import jaconv
from loguru import logger

from charset import is_hiragana, is_katakana
from config import Config
from kana_table import ROWS, VOWEL_ROW, KanaRow, RowKind
from vowel import Vowel

PROLONGED_SOUND_MARK = 'ー'

# ワ, ヮ and ヲ are not in any row, so their long vowel is fixed here
_IRREGULAR_PROLONGATIONS = {
    'ワ': 'あ',
    'ヮ': 'ぁ',
    'ヲ': 'お',
}


@lru_cache(maxsize=1)
def _settings() -> dict[str, Any]:
    try:
        return Config.load_config()
    except (OSError, ValueError) as e:
        logger.warning(f"設定ファイルを読み込めませんでした。既定値を使用します: {e}")
        return Config.default_config()


def reload_settings() -> None:
    _settings.cache_clear()


def find_row_for_hiragana(hiragana: str) -> KanaRow | None:
    for row in ROWS:
        if hiragana in row:
            return row
    return None


def vowel_of_hiragana(hiragana: str) -> Vowel | None:
    row = find_row_for_hiragana(hiragana)
    if row is None:
        if _settings()['debug']:
            logger.debug(f"母音が見つかりませんでした: {hiragana}")
        return None
    return row.vowel_for(hiragana)


def prolonged_hiragana_for_vowel(vowel: Vowel) -> str:
    match vowel:
        case Vowel.A:
            return 'あ'
        case Vowel.I | Vowel.E:
            return 'い'
        case Vowel.U | Vowel.O:
            return 'う'
        case _:
            raise ValueError(f"無効な母音: {vowel}")


def convert_vowel_in_stem(hiragana: str, to_vowel: Vowel) -> str:
    """
    Swap the vowel of a verb/adjective stem ending, keeping its row.
    e.g. き + A -> か, し + E -> せ, い + A -> わ, わ + I -> い
    """
    if not is_hiragana(hiragana):
        return hiragana

    # わ conjugates as the A slot of the vowel row
    row = VOWEL_ROW if hiragana == 'わ' else find_row_for_hiragana(hiragana)
    if row is None:
        return hiragana

    if row.kind is RowKind.VOWEL and to_vowel is Vowel.A:
        return 'わ'

    converted = row.glyph_for(to_vowel)
    if converted is None:
        message = f"{row.name}行に{to_vowel.name}の段はありません: {hiragana}"
        if _settings()['converter']['strict_stem_mutation']:
            raise ValueError(message)
        logger.warning(message)
        return hiragana
    return converted


def katakana_to_hiragana(katakana: str) -> str:
    if not is_katakana(katakana):
        return katakana
    return jaconv.kata2hira(katakana)


def hiragana_to_katakana(hiragana: str) -> str:
    if not is_hiragana(hiragana):
        return hiragana
    return jaconv.hira2kata(hiragana)


def _prolong(previous: str) -> str:
    if previous in _IRREGULAR_PROLONGATIONS:
        return _IRREGULAR_PROLONGATIONS[previous]

    vowel = vowel_of_hiragana(katakana_to_hiragana(previous))
    if vowel is None:
        return PROLONGED_SOUND_MARK
    return prolonged_hiragana_for_vowel(vowel)


def katakana_to_hiragana_string(katakana: str) -> str:
    result = []
    for i, ch in enumerate(katakana):
        if is_hiragana(ch) or not is_katakana(ch):
            result.append(ch)
        elif ch == PROLONGED_SOUND_MARK:
            result.append(_prolong(katakana[i - 1]) if i > 0 else ch)
        else:
            result.append(katakana_to_hiragana(ch))

    converted = ''.join(result)
    if _settings()['debug']:
        logger.debug(f"ひらがなに変換しました: {katakana} -> {converted}")
    return converted


def hiragana_to_katakana_string(hiragana: str) -> str:
    converted = jaconv.hira2kata(hiragana)
    if _settings()['debug']:
        logger.debug(f"カタカナに変換しました: {hiragana} -> {converted}")
    return converted


convert_to_vowel_in_stem = convert_vowel_in_stem
