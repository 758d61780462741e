# rubik_trainer/tests/test_moves.py
import unittest

from rubik_trainer.logic.moves import (
    ALL_MOVES,
    face_of,
    inverse_move,
    inverse_sequence,
    is_valid_move,
    modifier_of,
    normalize_token,
    parse_algorithm,
    parse_sequence,
)


class TestMoves(unittest.TestCase):
    def test_alphabet_has_18_moves(self):
        self.assertEqual(len(ALL_MOVES), 18)
        self.assertEqual(len(set(ALL_MOVES)), 18)

    def test_face_and_modifier(self):
        self.assertEqual(face_of("R'"), "R")
        self.assertEqual(modifier_of("R'"), "'")
        self.assertEqual(modifier_of("F2"), "2")
        self.assertEqual(modifier_of("U"), "")

    def test_inverse_move(self):
        self.assertEqual(inverse_move("R"), "R'")
        self.assertEqual(inverse_move("U'"), "U")
        self.assertEqual(inverse_move("B2"), "B2")

    def test_inverse_sequence_reverses_and_inverts(self):
        seq = ["R", "U", "R'", "U'", "F", "B2", "L'", "D"]
        self.assertEqual(
            inverse_sequence(seq),
            ["D'", "L", "B2", "F'", "U", "R", "U'", "R'"],
        )
        self.assertEqual(inverse_sequence([]), [])

    def test_normalize_token(self):
        self.assertEqual(normalize_token(" R’ "), "R'")
        self.assertEqual(normalize_token("D2'"), "D2")
        self.assertEqual(normalize_token(""), "")
        with self.assertRaises(ValueError):
            normalize_token("X")
        with self.assertRaises(ValueError):
            normalize_token("R3")

    def test_parse_sequence_is_strict(self):
        self.assertEqual(parse_sequence("R U R' U'"), ["R", "U", "R'", "U'"])
        with self.assertRaises(ValueError):
            parse_sequence("R x U")

    def test_parse_algorithm_drops_unknown_tokens(self):
        self.assertEqual(parse_algorithm("  R  x U\tR' M U' r "), ["R", "U", "R'", "U'"])
        self.assertEqual(parse_algorithm(""), [])

    def test_is_valid_move(self):
        self.assertTrue(is_valid_move("L2"))
        self.assertFalse(is_valid_move("L2'"))
        self.assertFalse(is_valid_move("l"))


if __name__ == "__main__":
    unittest.main()
