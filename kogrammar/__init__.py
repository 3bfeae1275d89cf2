from .unicode.hangul import romanize

__all__ = ['romanize']
