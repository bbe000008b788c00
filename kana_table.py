from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from vowel import Vowel


class RowKind(Enum):
    VOWEL = 'vowel'
    SMALL_VOWEL = 'small_vowel'
    CONSONANT = 'consonant'
    Y = 'y'
    SMALL_Y = 'small_y'


@dataclass(frozen=True)
class KanaRow:
    """One row of the hiragana table, readable in both directions."""

    name: str
    kind: RowKind
    glyphs: Mapping[Vowel, str]
    vowels: Mapping[str, Vowel]

    @classmethod
    def build(cls, name: str, kind: RowKind, glyphs: str) -> 'KanaRow':
        """
        Build a row from its glyphs in A, I, U, E, O order.
        Y rows pass three glyphs, which are bound to A, U and O.
        """
        order = (Vowel.A, Vowel.U, Vowel.O) if kind in (RowKind.Y, RowKind.SMALL_Y) else tuple(Vowel)
        if len(glyphs) != len(order):
            raise ValueError(f"{name}行の文字数が正しくありません: {glyphs}")
        if len(set(glyphs)) != len(glyphs):
            raise ValueError(f"{name}行に重複した文字があります: {glyphs}")

        forward = dict(zip(order, glyphs))
        reverse = {glyph: vowel for vowel, glyph in forward.items()}
        return cls(name, kind, MappingProxyType(forward), MappingProxyType(reverse))

    def __contains__(self, glyph: str) -> bool:
        return glyph in self.vowels

    def glyph_for(self, vowel: Vowel) -> str | None:
        return self.glyphs.get(vowel)

    def vowel_for(self, glyph: str) -> Vowel | None:
        return self.vowels.get(glyph)


VOWEL_ROW = KanaRow.build('あ', RowKind.VOWEL, 'あいうえお')
SMALL_VOWEL_ROW = KanaRow.build('ぁ', RowKind.SMALL_VOWEL, 'ぁぃぅぇぉ')
K_ROW = KanaRow.build('か', RowKind.CONSONANT, 'かきくけこ')
G_ROW = KanaRow.build('が', RowKind.CONSONANT, 'がぎぐげご')
S_ROW = KanaRow.build('さ', RowKind.CONSONANT, 'さしすせそ')
Z_ROW = KanaRow.build('ざ', RowKind.CONSONANT, 'ざじずぜぞ')
T_ROW = KanaRow.build('た', RowKind.CONSONANT, 'たちつてと')
D_ROW = KanaRow.build('だ', RowKind.CONSONANT, 'だぢづでど')
N_ROW = KanaRow.build('な', RowKind.CONSONANT, 'なにぬねの')
H_ROW = KanaRow.build('は', RowKind.CONSONANT, 'はひふへほ')
B_ROW = KanaRow.build('ば', RowKind.CONSONANT, 'ばびぶべぼ')
P_ROW = KanaRow.build('ぱ', RowKind.CONSONANT, 'ぱぴぷぺぽ')
M_ROW = KanaRow.build('ま', RowKind.CONSONANT, 'まみむめも')
R_ROW = KanaRow.build('ら', RowKind.CONSONANT, 'らりるれろ')
Y_ROW = KanaRow.build('や', RowKind.Y, 'やゆよ')
SMALL_Y_ROW = KanaRow.build('ゃ', RowKind.SMALL_Y, 'ゃゅょ')

# search order of find_row_for_hiragana
ROWS = (
    VOWEL_ROW,
    SMALL_VOWEL_ROW,
    K_ROW,
    G_ROW,
    S_ROW,
    Z_ROW,
    T_ROW,
    D_ROW,
    N_ROW,
    H_ROW,
    B_ROW,
    P_ROW,
    M_ROW,
    R_ROW,
    Y_ROW,
    SMALL_Y_ROW,
)


def _check_partition(rows: tuple[KanaRow, ...]) -> None:
    seen = {}
    for row in rows:
        for glyph in row.vowels:
            if glyph in seen:
                raise ValueError(f"{glyph}が{seen[glyph]}行と{row.name}行の両方に含まれています")
            seen[glyph] = row.name


_check_partition(ROWS)
