"""
Romanization of Hangul text, following the National Institute of Korean Language's Revised Romanization rules.

:author: Doug Skrypa
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Iterator

from .jamo import Initial, Slot, decompose
from .rules import apply_sound_changes

__all__ = ['romanize', 'render']
log = logging.getLogger(__name__)


def romanize(text: str) -> str:
    """
    Convert the Hangul syllables in the given text to Roman letters.  Any other characters are left as-is.

    Sound change rules (palatalization, nasalization, and liquid assimilation) are applied to adjacent syllables before
    they are romanized, and final consonants that are followed by a vowel-initial syllable are carried over to that
    syllable (e.g., 국어 -> gugeo).

    :param text: The text to romanize
    :return: The romanized text
    """
    return render(apply_sound_changes(decompose(text)))


def render(slots: Sequence[Slot]) -> str:
    return ''.join(_iter_romanized(slots))


def _iter_romanized(slots: Sequence[Slot]) -> Iterator[str]:
    last = len(slots) - 1
    prev = None
    for i, slot in enumerate(slots):
        if not slot.is_hangul:
            yield slot.char
        else:
            if _carries_over(prev, slot):
                yield prev.final.romanized

            yield slot.initial.romanized
            yield slot.medial.romanized
            if slot.final and not (i < last and _carries_over(slot, slots[i + 1])):
                yield slot.final.terminal

        prev = slot


def _carries_over(slot: Optional[Slot], next_slot: Slot) -> bool:
    """True if the given slot's final is pronounced at the start of the next slot"""
    return (
        slot is not None
        and slot.is_hangul
        and bool(slot.final)
        and next_slot.is_hangul
        and next_slot.initial == Initial.NULL
    )
