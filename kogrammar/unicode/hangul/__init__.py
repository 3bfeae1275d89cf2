from .classification import *
from .jamo import *
from .romanization import *

__all__ = ['is_hangul_syllable', 'Initial', 'Medial', 'Final', 'Slot', 'decompose', 'romanize', 'render']
