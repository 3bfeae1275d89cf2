from .constants import SYLLABLES_START, SYLLABLES_END

__all__ = ['is_hangul_syllable']


def is_hangul_syllable(char: str) -> bool:
    if len(char) != 1:
        return False
    return SYLLABLES_START <= ord(char) <= SYLLABLES_END
