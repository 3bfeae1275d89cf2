#!/usr/bin/env python

from kogrammar.unicode.hangul import Initial, Final, decompose
from kogrammar.unicode.hangul.rules import apply_sound_changes, palatalize, nasalize, assimilate_liquid
from kogrammar.test_common import TestCaseBase, main


class SoundChangeTest(TestCaseBase):
    def test_palatalization(self):
        for text in ('같이', '맏이'):
            with self.subTest(text=text):
                first, second = apply_sound_changes(decompose(text))
                self.assertEqual(Final.NONE, first.final)
                self.assertEqual(Initial.CH, second.initial)

    def test_palatalization_requires_i(self):
        first, second = decompose('같아')
        self.assertFalse(palatalize(first, second))
        self.assertEqual(Final.T, first.final)
        self.assertEqual(Initial.NULL, second.initial)

    def test_nasalization(self):
        cases = {
            '백마': Final.NG, '부엌문': Final.NG, '닫는': Final.N, '옷마': Final.N, '밥물': Final.M, '앞날': Final.M
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                *_, prev, curr = apply_sound_changes(decompose(text))
                self.assertEqual(expected, prev.final)

    def test_nasalization_ignores_other_finals(self):
        prev, curr = decompose('물맛')
        self.assertFalse(nasalize(prev, curr))
        self.assertEqual(Final.L, prev.final)

    def test_no_nasalization_before_other_initials(self):
        prev, curr = apply_sound_changes(decompose('백기'))
        self.assertEqual(Final.G, prev.final)

    def test_liquid_n_before_r(self):
        prev, curr = apply_sound_changes(decompose('신라'))
        self.assertEqual(Final.L, prev.final)
        self.assertEqual(Initial.R, curr.initial)

    def test_liquid_l_before_n(self):
        prev, curr = apply_sound_changes(decompose('별내'))
        self.assertEqual(Final.L, prev.final)
        self.assertEqual(Initial.R, curr.initial)

    def test_liquid_no_match(self):
        prev, curr = decompose('종로')
        self.assertFalse(assimilate_liquid(prev, curr))
        self.assertEqual(Final.NG, prev.final)
        self.assertEqual(Initial.R, curr.initial)

    def test_no_rules_for_vowel_initial(self):
        prev, curr = apply_sound_changes(decompose('국어'))
        self.assertEqual(Final.G, prev.final)
        self.assertEqual(Initial.NULL, curr.initial)

    def test_no_rules_across_non_hangul(self):
        prev, space, curr = apply_sound_changes(decompose('백 마'))
        self.assertEqual(Final.G, prev.final)
        self.assertEqual(' ', space.char)

    def test_changes_visible_to_next_pair(self):
        # 신 -> 실 via ㄴ+ㄹ, then 라 has no final, so only the first pair changes
        slots = apply_sound_changes(decompose('신라면'))
        self.assertEqual([Final.L, Final.NONE, Final.N], [s.final for s in slots])
        # 냇's initial is rewritten by the first pair, and its final by the second
        slots = apply_sound_changes(decompose('별냇물'))
        self.assertEqual(Initial.R, slots[1].initial)
        self.assertEqual(Final.N, slots[1].final)

    def test_returns_same_slots(self):
        slots = decompose('백마')
        self.assertIs(slots, apply_sound_changes(slots))

    def test_empty_and_single(self):
        self.assertEqual([], apply_sound_changes([]))
        slot, = apply_sound_changes(decompose('닭'))
        self.assertEqual(Final.LG, slot.final)


if __name__ == '__main__':
    main()
