from enum import Enum


class Vowel(Enum):
    A = 'a'
    I = 'i'
    U = 'u'
    E = 'e'
    O = 'o'
