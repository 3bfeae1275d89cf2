"""
Sound change rules that are applied to adjacent syllables before romanization.

Each rule operates on a pair of syllables, where the first syllable has a final consonant.  Rules rewrite the jamo of
the pair in place, so the results of one pair are visible when the next pair is evaluated.

:author: Doug Skrypa
"""

from __future__ import annotations

import logging
from typing import Sequence

from .jamo import Initial, Medial, Final, Slot

__all__ = ['apply_sound_changes', 'palatalize', 'nasalize', 'assimilate_liquid']
log = logging.getLogger(__name__)

PALATALIZED_FINALS = frozenset({Final.D, Final.T})
NASAL_INITIALS = frozenset({Initial.N, Initial.M})
NASALIZED_FINALS = {
    Final.G: Final.NG,
    Final.KK: Final.NG,
    Final.K: Final.NG,
    Final.D: Final.N,
    Final.S: Final.N,
    Final.SS: Final.N,
    Final.J: Final.N,
    Final.CH: Final.N,
    Final.T: Final.N,
    Final.B: Final.M,
    Final.P: Final.M,
}


def apply_sound_changes(slots: Sequence[Slot]) -> Sequence[Slot]:
    """
    Sweep over each adjacent pair of slots once, from left to right, and apply the first applicable rule(s).

    Palatalization takes precedence - if it applies, then no other rules are evaluated for that pair.  Otherwise, when
    the second syllable starts with a consonant, nasalization is applied, followed by liquid assimilation (which sees
    the final as updated by nasalization).
    """
    for prev, curr in zip(slots, slots[1:]):
        if not prev.is_hangul or not curr.is_hangul or not prev.final:
            continue
        if palatalize(prev, curr):
            continue
        if curr.initial != Initial.NULL:
            nasalize(prev, curr)
            assimilate_liquid(prev, curr)

    return slots


def palatalize(prev: Slot, curr: Slot) -> bool:
    """ㄷ/ㅌ + 이 => ㅊ (e.g., 같이 -> gachi)"""
    if prev.final in PALATALIZED_FINALS and curr.initial == Initial.NULL and curr.medial == Medial.I:
        log.debug(f'Palatalizing {prev!r} + {curr!r}')
        prev.final = Final.NONE
        curr.initial = Initial.CH
        return True
    return False


def nasalize(prev: Slot, curr: Slot) -> bool:
    """Stops before ㄴ/ㅁ become nasals (e.g., 백마 -> baengma)"""
    if curr.initial in NASAL_INITIALS and (final := NASALIZED_FINALS.get(prev.final)):
        log.debug(f'Nasalizing {prev!r} + {curr!r}: {prev.final.name} -> {final.name}')
        prev.final = final
        return True
    return False


def assimilate_liquid(prev: Slot, curr: Slot) -> bool:
    """ㄴ + ㄹ => ㄹ + ㄹ (e.g., 신라); ㄹ + ㄴ => ㄹ + ㄹ (e.g., 별내)"""
    if prev.final == Final.N and curr.initial == Initial.R:
        log.debug(f'Assimilating {prev!r} + {curr!r}: final N -> L')
        prev.final = Final.L
        return True
    elif prev.final == Final.L and curr.initial == Initial.N:
        log.debug(f'Assimilating {prev!r} + {curr!r}: initial N -> R')
        curr.initial = Initial.R
        return True
    return False
