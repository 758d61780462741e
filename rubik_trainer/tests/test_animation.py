# rubik_trainer/tests/test_animation.py
import unittest

from rubik_trainer.core import SOLVED, MoveAnimator, Phase, Timeline, apply_move
from rubik_trainer.core.animation import VISUAL_SIGN, target_angle_for


def run_until_idle(animator, limit=1000):
    ticks = 0
    while animator.animating and ticks < limit:
        animator.tick(0.016)
        ticks += 1
    return ticks


class TestTargetAngle(unittest.TestCase):
    def test_sign_table(self):
        for face in "RUF":
            self.assertEqual(target_angle_for(face), -90.0)
            self.assertEqual(target_angle_for(face + "'"), 90.0)
        for face in "LDB":
            self.assertEqual(target_angle_for(face), 90.0)
            self.assertEqual(target_angle_for(face + "'"), -90.0)
        self.assertEqual(set(VISUAL_SIGN), set("RUFLDB"))

    def test_half_turn_magnitude(self):
        self.assertEqual(abs(target_angle_for("U2")), 180.0)
        self.assertEqual(abs(target_angle_for("B2")), 180.0)


class TestMoveAnimator(unittest.TestCase):
    def setUp(self):
        self.timeline = Timeline()
        self.animator = MoveAnimator(self.timeline, step=6.0)

    def test_starts_idle(self):
        self.assertEqual(self.animator.phase, Phase.IDLE)
        self.assertFalse(self.animator.animating)
        self.assertIsNone(self.animator.animation)

    def test_request_enters_animating(self):
        self.assertTrue(self.animator.request_move("R"))
        self.assertEqual(self.animator.phase, Phase.ANIMATING)
        anim = self.animator.animation
        self.assertEqual(anim.face, "R")
        self.assertEqual(anim.axis, "x")
        self.assertEqual(anim.current_angle, 0.0)
        self.assertEqual(anim.target_angle, -90.0)
        # Nada se confirma hasta terminar el giro.
        self.assertEqual(len(self.timeline), 1)

    def test_tick_advances_then_commits(self):
        self.animator.request_move("L")
        self.assertIsNone(self.animator.tick(0.016))
        self.assertAlmostEqual(self.animator.animation.current_angle, 6.0)
        self.assertAlmostEqual(self.animator.animation.progress, 6.0 / 90.0)
        self.assertEqual(self.timeline.current, SOLVED)

        ticks = run_until_idle(self.animator)
        self.assertEqual(ticks, 14)
        self.assertEqual(self.animator.phase, Phase.IDLE)
        self.assertIsNone(self.animator.animation)
        self.assertEqual(self.timeline.executed_moves, ["L"])
        self.assertEqual(self.timeline.current, apply_move(SOLVED, "L"))

    def test_angle_is_clamped_to_target(self):
        animator = MoveAnimator(self.timeline, step=50.0)
        seen = []
        animator.add_commit_listener(lambda mv, st: seen.append(mv))
        animator.request_move("U'")
        animator.tick()
        self.assertAlmostEqual(animator.animation.current_angle, 50.0)
        self.assertIsNotNone(animator.tick())
        self.assertEqual(seen, ["U'"])

    def test_half_turn_takes_twice_as_long(self):
        self.animator.request_move("F2")
        self.assertEqual(run_until_idle(self.animator), 30)
        self.assertEqual(self.timeline.current, apply_move(SOLVED, "F2"))

    def test_second_request_while_animating_is_dropped(self):
        self.assertTrue(self.animator.request_move("R"))
        self.animator.tick()
        before = (self.animator.animation.move, self.animator.animation.current_angle)
        self.assertFalse(self.animator.request_move("U"))
        after = (self.animator.animation.move, self.animator.animation.current_angle)
        self.assertEqual(before, after)
        self.assertEqual(len(self.timeline), 1)

        run_until_idle(self.animator)
        self.assertEqual(self.timeline.executed_moves, ["R"])

    def test_request_during_commit_is_dropped(self):
        phases = []

        class SpyTimeline(Timeline):
            def commit(inner, move):
                phases.append(self.animator.phase)
                phases.append(self.animator.request_move("D"))
                return super().commit(move)

        timeline = SpyTimeline()
        self.animator = MoveAnimator(timeline)
        self.animator.request_move("B")
        run_until_idle(self.animator)
        self.assertEqual(phases, [Phase.COMMIT_PENDING, False])
        self.assertEqual(timeline.executed_moves, ["B"])
        self.assertFalse(self.animator.animating)

    def test_listener_runs_after_idle(self):
        calls = []

        def listener(move, state):
            calls.append((move, self.animator.phase, state))

        self.animator.add_commit_listener(listener)
        self.animator.request_move("D")
        run_until_idle(self.animator)
        self.assertEqual(calls, [("D", Phase.IDLE, self.timeline.current)])

        self.animator.remove_commit_listener(listener)
        self.animator.request_move("D'")
        run_until_idle(self.animator)
        self.assertEqual(len(calls), 1)

    def test_tick_while_idle_does_nothing(self):
        self.assertIsNone(self.animator.tick(1.0))
        self.assertEqual(len(self.timeline), 1)

    def test_invalid_step_and_move(self):
        with self.assertRaises(ValueError):
            MoveAnimator(self.timeline, step=0)
        with self.assertRaises(ValueError):
            self.animator.request_move("Q")
        self.assertFalse(self.animator.animating)


if __name__ == "__main__":
    unittest.main()
