# rubik_trainer/tests/test_scramble.py
import unittest

from rubik_trainer.core import SOLVED, apply_sequence
from rubik_trainer.logic.moves import ALL_MOVES, face_of
from rubik_trainer.logic.scramble import generate_scramble, scrambled_cube


class TestScramble(unittest.TestCase):
    def test_length_and_no_repeated_face(self):
        seq = generate_scramble(50)
        self.assertEqual(len(seq), 50)
        for prev, cur in zip(seq, seq[1:]):
            self.assertNotEqual(face_of(prev), face_of(cur))

    def test_only_valid_moves(self):
        for m in generate_scramble(200, seed=7):
            self.assertIn(m, ALL_MOVES)

    def test_seed_is_reproducible(self):
        self.assertEqual(generate_scramble(25, seed=42), generate_scramble(25, seed=42))

    def test_zero_and_negative(self):
        self.assertEqual(generate_scramble(0), [])
        with self.assertRaises(ValueError):
            generate_scramble(-1)

    def test_scrambled_cube_matches_sequence(self):
        state, seq = scrambled_cube(20, seed=3)
        self.assertEqual(len(seq), 20)
        self.assertEqual(state, apply_sequence(SOLVED, seq))


if __name__ == "__main__":
    unittest.main()
