# https://en.wikipedia.org/wiki/Hangul_Syllables
SYLLABLES_START = 0xAC00
SYLLABLES_END = 0xD7A3

INITIAL_COUNT = 19
MEDIAL_COUNT = 21
FINAL_COUNT = 28

# https://en.wikipedia.org/wiki/Hangul_Compatibility_Jamo
JAMO_START = 0x3130
MEDIAL_START = 0x314F
# The 0x3130 - 0x314E block contains both leading and final consonants - offsets from 0x3130 of lead consonants:
INITIAL_OFFSETS = (1, 2, 4, 7, 8, 9, 17, 18, 19, 21, 22, 23, 24, 25, 26, 27, 28, 29, 30)
# There are 3 chars that may not be used as a final consonant:
FINAL_OFFSETS = tuple(i for i in range(31) if i not in (8, 19, 25))

# region Romanization Tables

ROMANIZED_INITIALS = (
    'g', 'kk', 'n', 'd', 'tt', 'r', 'm', 'b', 'pp', 's', 'ss', '', 'j', 'jj', 'ch', 'k', 't', 'p', 'h'
)
ROMANIZED_MEDIALS = (
    # ㅏ,ㅐ,ㅑ,ㅒ,ㅓ,ㅔ,ㅕ,ㅖ,ㅗ,ㅘ,ㅙ,ㅚ,ㅛ,ㅜ,ㅝ,ㅞ,ㅟ,ㅠ,ㅡ,ㅢ,ㅣ
    'a', 'ae', 'ya', 'yae', 'eo', 'e', 'yeo', 'ye', 'o', 'wa', 'wae', 'oe', 'yo', 'u', 'wo', 'we', 'wi', 'yu', 'eu',
    'ui', 'i'
)
# Used when a final is carried over to the start of a following vowel-initial syllable
ROMANIZED_FINALS = (
    # -,ㄱ,ㄲ,ㄳ,ㄴ,ㄵ,ㄶ,ㄷ,ㄹ,ㄺ,ㄻ,ㄼ,ㄽ,ㄾ,ㄿ,ㅀ,ㅁ,ㅂ,ㅄ,ㅅ,ㅆ,ㅇ,ㅈ,ㅊ,ㅋ,ㅌ,ㅍ,ㅎ
    '', 'g', 'kk', 'gs', 'n', 'nj', 'nh', 'd', 'l', 'lg', 'lm', 'lb', 'ls', 'lt', 'lp', 'lh', 'm', 'b', 'bs', 's',
    'ss', 'ng', 'j', 'ch', 'k', 't', 'p', 'h'
)
# Representative (unreleased) sounds for finals that are not followed by a vowel
TERMINAL_FINALS = (
    '', 'k', 'k', 'k', 'n', 'n', 'n', 't', 'l', 'k', 'm', 'p', 'l', 't', 'p', 't', 'm', 'p', 'p', 't', 't', 'ng', 't',
    't', 'k', 't', 'p', 'h'
)

# endregion
