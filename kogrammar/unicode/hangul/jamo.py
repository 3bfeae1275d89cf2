"""
Phoneme classes for the components of precomposed Hangul syllables, and decomposition of text into syllable slots.

:author: Doug Skrypa
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional

from .classification import is_hangul_syllable
from .constants import SYLLABLES_START, MEDIAL_COUNT, FINAL_COUNT, JAMO_START, MEDIAL_START
from .constants import INITIAL_OFFSETS, FINAL_OFFSETS
from .constants import ROMANIZED_INITIALS, ROMANIZED_MEDIALS, ROMANIZED_FINALS, TERMINAL_FINALS

__all__ = ['Initial', 'Medial', 'Final', 'Slot', 'decompose']
log = logging.getLogger(__name__)


class Initial(IntEnum):
    """Leading consonant (Choseong)"""
    G = 0  # ㄱ
    KK = 1  # ㄲ
    N = 2  # ㄴ
    D = 3  # ㄷ
    TT = 4  # ㄸ
    R = 5  # ㄹ
    M = 6  # ㅁ
    B = 7  # ㅂ
    PP = 8  # ㅃ
    S = 9  # ㅅ
    SS = 10  # ㅆ
    NULL = 11  # ㅇ (silent)
    J = 12  # ㅈ
    JJ = 13  # ㅉ
    CH = 14  # ㅊ
    K = 15  # ㅋ
    T = 16  # ㅌ
    P = 17  # ㅍ
    H = 18  # ㅎ

    @property
    def jamo(self) -> str:
        return chr(JAMO_START + INITIAL_OFFSETS[self])

    @property
    def romanized(self) -> str:
        return ROMANIZED_INITIALS[self]


class Medial(IntEnum):
    """Vowel (Jungseong)"""
    A = 0
    AE = 1
    YA = 2
    YAE = 3
    EO = 4
    E = 5
    YEO = 6
    YE = 7
    O = 8
    WA = 9
    WAE = 10
    OE = 11
    YO = 12
    U = 13
    WO = 14
    WE = 15
    WI = 16
    YU = 17
    EU = 18
    UI = 19
    I = 20  # noqa: E741

    @property
    def jamo(self) -> str:
        return chr(MEDIAL_START + self)

    @property
    def romanized(self) -> str:
        return ROMANIZED_MEDIALS[self]


class Final(IntEnum):
    """Final consonant (Jongseong), or NONE"""
    NONE = 0
    G = 1  # ㄱ
    KK = 2  # ㄲ
    GS = 3  # ㄳ
    N = 4  # ㄴ
    NJ = 5  # ㄵ
    NH = 6  # ㄶ
    D = 7  # ㄷ
    L = 8  # ㄹ
    LG = 9  # ㄺ
    LM = 10  # ㄻ
    LB = 11  # ㄼ
    LS = 12  # ㄽ
    LT = 13  # ㄾ
    LP = 14  # ㄿ
    LH = 15  # ㅀ
    M = 16  # ㅁ
    B = 17  # ㅂ
    BS = 18  # ㅄ
    S = 19  # ㅅ
    SS = 20  # ㅆ
    NG = 21  # ㅇ
    J = 22  # ㅈ
    CH = 23  # ㅊ
    K = 24  # ㅋ
    T = 25  # ㅌ
    P = 26  # ㅍ
    H = 27  # ㅎ

    @property
    def jamo(self) -> str:
        return chr(JAMO_START + FINAL_OFFSETS[self]) if self else ''

    @property
    def romanized(self) -> str:
        """The full form, used when this final is carried over to a following vowel-initial syllable"""
        return ROMANIZED_FINALS[self]

    @property
    def terminal(self) -> str:
        """The representative sound used when this final ends a syllable"""
        return TERMINAL_FINALS[self]


class Slot:
    """
    A single character from the input.  Hangul syllables are split into their initial / medial / final components,
    which the sound change rules may rewrite in place.  All other characters are opaque, and their components are None.
    """

    __slots__ = ('char', 'initial', 'medial', 'final')

    def __init__(
        self,
        char: str,
        initial: Optional[Initial] = None,
        medial: Optional[Medial] = None,
        final: Optional[Final] = None,
    ):
        self.char = char
        self.initial = initial
        self.medial = medial
        self.final = final

    @classmethod
    def from_char(cls, char: str) -> Slot:
        if not is_hangul_syllable(char):
            return cls(char)
        # syllable = 588 initial + 28 medial + final + 44032
        i, rem = divmod(ord(char) - SYLLABLES_START, MEDIAL_COUNT * FINAL_COUNT)
        m, f = divmod(rem, FINAL_COUNT)
        return cls(char, Initial(i), Medial(m), Final(f))

    @property
    def is_hangul(self) -> bool:
        return self.initial is not None

    def __repr__(self) -> str:
        if not self.is_hangul:
            return f'<Slot[{self.char!r}]>'
        return f'<Slot[{self.char!r}: {self.initial.jamo}, {self.medial.jamo}, {self.final.jamo or "-"}]>'

    def __str__(self) -> str:
        return self.char


def decompose(text: str) -> list[Slot]:
    return [Slot.from_char(c) for c in text]
