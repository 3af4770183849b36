import math
import unittest

import numpy as np

from penthicken.tools.offsetpath import (
    copy_schedule,
    default_rng,
    offset_command,
    offset_copies,
    offset_path,
)
from penthicken.tools.pathparse import PathCommand, parse_path


class FixedRandom:
    """Random source returning a fixed sequence of values and counting draws."""

    def __init__(self, *values):
        self.values = list(values) or [0.0]
        self.draws = 0

    def random(self):
        value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return value


class TestOffsetPath(unittest.TestCase):
    """Tests the jittered copies of path data."""

    def test_copy_count(self):
        rng = default_rng(1)
        for n in range(0, 7):
            self.assertEqual(len(offset_copies("M0,0 L200,0", n, 0.5, rng)), n)

    def test_copy_count_negative(self):
        self.assertRaises(ValueError, lambda: offset_copies("M0,0", -1, 0.5))

    def test_schedule(self):
        self.assertEqual(
            list(copy_schedule(4, 0.5)),
            [(-1, 0.5), (1, 0.5), (-1, 1.0), (1, 1.0)],
        )
        self.assertEqual(list(copy_schedule(0, 0.5)), [])

    def test_move_line_displaced(self):
        # angle 0 moves along +x by the signed distance
        result = offset_path("M0,0 L10,10", -0.5, FixedRandom(0.0))
        self.assertEqual(result, "M-0.5,0L9.5,10")

    def test_quarter_turn(self):
        command = offset_command(PathCommand("L", [10, 10]), 2.0, FixedRandom(0.25))
        self.assertAlmostEqual(command.values[0], 10.0)
        self.assertAlmostEqual(command.values[1], 12.0)

    def test_only_first_pair_of_line(self):
        command = offset_command(PathCommand("M", [0, 0, 5, 5]), 1.0, FixedRandom(0.0))
        self.assertEqual(command.values, [1.0, 0.0, 5, 5])

    def test_cubic_shares_one_angle(self):
        rng = FixedRandom(0.0)
        command = offset_command(PathCommand("C", [0, 0, 1, 1, 2, 2]), 1.0, rng)
        self.assertEqual(command.values, [1.0, 0.0, 2.0, 1.0, 3.0, 2.0])
        self.assertEqual(rng.draws, 1)

    def test_source_not_modified(self):
        source = PathCommand("C", [0, 0, 1, 1, 2, 2])
        offset_command(source, 1.0, FixedRandom(0.0))
        self.assertEqual(source.values, [0, 0, 1, 1, 2, 2])

    def test_other_commands_untouched(self):
        rng = FixedRandom(0.0)
        for d in ("H10", "V10", "S1,2,3,4", "Q1,2,3,4", "T1,2", "A1,1,0,0,1,5,5", "Z"):
            command = parse_path(d)[0]
            self.assertEqual(offset_command(command, 3.0, rng), command, d)
        self.assertEqual(rng.draws, 0)

    def test_relative_commands_displaced(self):
        result = offset_path("m1,1l2,2c0,0,0,0,0,0", 1.0, FixedRandom(0.0))
        self.assertEqual(result, "m2,1l3,2c1,0,1,0,1,0")

    def test_missing_coordinates_become_nan(self):
        command = offset_command(PathCommand("M", []), 1.0, FixedRandom(0.0))
        self.assertEqual(len(command.values), 2)
        self.assertTrue(all(math.isnan(v) for v in command.values))
        command = offset_command(PathCommand("C", [0, 0, 1]), 1.0, FixedRandom(0.0))
        self.assertEqual(len(command.values), 4)
        self.assertTrue(math.isnan(command.values[3]))
        self.assertEqual(offset_path("M", 1.0, FixedRandom(0.0)), "MNaN,NaN")

    def test_displacement_magnitude(self):
        rng = default_rng(7)
        source = parse_path("M10,20 L30,40")
        for direction, magnitude in copy_schedule(6, 0.5):
            copied = parse_path(offset_path("M10,20 L30,40", magnitude * direction, rng))
            for original, moved in zip(source, copied):
                dx = moved.values[0] - original.values[0]
                dy = moved.values[1] - original.values[1]
                self.assertAlmostEqual(math.hypot(dx, dy), magnitude)

    def test_copies_differ_from_original(self):
        copies = offset_copies("M0,0 L200,0", 2, 0.5, default_rng(3))
        for d in copies:
            self.assertNotEqual(d, "M0,0L200,0")

    def test_seed_reproducible(self):
        a = offset_copies("M0,0 C10,10 20,20 30,30 L5,5", 4, 0.5, default_rng(42))
        b = offset_copies("M0,0 C10,10 20,20 30,30 L5,5", 4, 0.5, default_rng(42))
        self.assertEqual(a, b)

    def test_default_rng(self):
        self.assertIsInstance(default_rng(), np.random.Generator)
        value = default_rng(0).random()
        self.assertTrue(0.0 <= value < 1.0)
