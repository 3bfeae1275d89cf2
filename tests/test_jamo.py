#!/usr/bin/env python

from kogrammar.unicode.hangul import Initial, Medial, Final, Slot, decompose, is_hangul_syllable
from kogrammar.unicode.hangul.constants import INITIAL_COUNT, MEDIAL_COUNT, FINAL_COUNT
from kogrammar.unicode.hangul.constants import ROMANIZED_FINALS, TERMINAL_FINALS
from kogrammar.test_common import TestCaseBase, main


class JamoTest(TestCaseBase):
    def test_enum_sizes(self):
        self.assertEqual(INITIAL_COUNT, len(Initial))
        self.assertEqual(MEDIAL_COUNT, len(Medial))
        self.assertEqual(FINAL_COUNT, len(Final))

    def test_jamo_chars(self):
        self.assertEqual('ㄱ', Initial.G.jamo)
        self.assertEqual('ㅇ', Initial.NULL.jamo)
        self.assertEqual('ㅎ', Initial.H.jamo)
        self.assertEqual('ㅏ', Medial.A.jamo)
        self.assertEqual('ㅣ', Medial.I.jamo)
        self.assertEqual('', Final.NONE.jamo)
        self.assertEqual('ㄺ', Final.LG.jamo)
        self.assertEqual('ㅄ', Final.BS.jamo)
        self.assertEqual('ㅎ', Final.H.jamo)

    def test_romanized_tables(self):
        self.assertEqual(
            ['g', 'kk', 'n', 'd', 'tt', 'r', 'm', 'b', 'pp', 's', 'ss', '', 'j', 'jj', 'ch', 'k', 't', 'p', 'h'],
            [i.romanized for i in Initial],
        )
        self.assertEqual('ui', Medial.UI.romanized)
        self.assertEqual('wo', Medial.WO.romanized)
        self.assertEqual(list(ROMANIZED_FINALS), [f.romanized for f in Final])
        self.assertEqual(list(TERMINAL_FINALS), [f.terminal for f in Final])

    def test_final_forms_differ(self):
        self.assertEqual(('g', 'k'), (Final.G.romanized, Final.G.terminal))
        self.assertEqual(('lg', 'k'), (Final.LG.romanized, Final.LG.terminal))
        self.assertEqual(('ng', 'ng'), (Final.NG.romanized, Final.NG.terminal))


class DecomposeTest(TestCaseBase):
    def test_first_syllable(self):
        slot = Slot.from_char('가')
        self.assertTrue(slot.is_hangul)
        self.assertEqual((Initial.G, Medial.A, Final.NONE), (slot.initial, slot.medial, slot.final))

    def test_last_syllable(self):
        slot = Slot.from_char('힣')
        self.assertEqual((Initial.H, Medial.I, Final.H), (slot.initial, slot.medial, slot.final))

    def test_syllable_with_final(self):
        slot = Slot.from_char('닭')
        self.assertEqual((Initial.D, Medial.A, Final.LG), (slot.initial, slot.medial, slot.final))

    def test_opaque(self):
        for char in ('a', ' ', '\uabff', '\ud7a4', 'ㄱ', '日'):
            with self.subTest(char=char):
                slot = Slot.from_char(char)
                self.assertFalse(slot.is_hangul)
                self.assertEqual(char, slot.char)
                self.assertIsNone(slot.initial)
                self.assertIsNone(slot.final)

    def test_decompose_is_index_aligned(self):
        text = 'Hi 국어!'
        slots = decompose(text)
        self.assertEqual(len(text), len(slots))
        self.assertEqual(list(text), [slot.char for slot in slots])
        self.assertEqual([False, False, False, True, True, False], [slot.is_hangul for slot in slots])

    def test_decompose_empty(self):
        self.assertEqual([], decompose(''))

    def test_repr(self):
        self.assertEqual("<Slot['a']>", repr(Slot.from_char('a')))
        self.assertEqual("<Slot['국': ㄱ, ㅜ, ㄱ]>", repr(Slot.from_char('국')))
        self.assertEqual("<Slot['가': ㄱ, ㅏ, -]>", repr(Slot.from_char('가')))


class ClassificationTest(TestCaseBase):
    def test_is_hangul_syllable(self):
        self.assertTrue(is_hangul_syllable('가'))
        self.assertTrue(is_hangul_syllable('힣'))
        self.assertFalse(is_hangul_syllable('ㄱ'))
        self.assertFalse(is_hangul_syllable('a'))
        self.assertFalse(is_hangul_syllable(''))
        self.assertFalse(is_hangul_syllable('가가'))


if __name__ == '__main__':
    main()
