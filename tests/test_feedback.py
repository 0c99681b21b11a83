import random
import unittest

from guess_game import feedback, messages
from guess_game.feedback import classify


class TestClassify(unittest.TestCase):
    """Bucket boundaries for every guess/secret pair in range"""

    def test_every_pair_in_range(self):
        for g in range(1, 101):
            for s in range(1, 101):
                bucket = classify(g, s)
                d = abs(g - s)
                if d == 0:
                    self.assertEqual(bucket, feedback.EQUAL)
                    continue
                side = "less" if g < s else "greater"
                if d <= 5:
                    tier = "near"
                elif d <= 20:
                    tier = "mid"
                else:
                    tier = "far"
                self.assertEqual(bucket, f"{side}-{tier}", f"guess={g} secret={s}")

    def test_threshold_edges(self):
        self.assertEqual(classify(45, 50), feedback.LESS_NEAR)
        self.assertEqual(classify(44, 50), feedback.LESS_MID)
        self.assertEqual(classify(30, 50), feedback.LESS_MID)
        self.assertEqual(classify(29, 50), feedback.LESS_FAR)
        self.assertEqual(classify(55, 50), feedback.GREATER_NEAR)
        self.assertEqual(classify(56, 50), feedback.GREATER_MID)
        self.assertEqual(classify(70, 50), feedback.GREATER_MID)
        self.assertEqual(classify(71, 50), feedback.GREATER_FAR)

    def test_range_endpoints(self):
        self.assertEqual(classify(1, 1), feedback.EQUAL)
        self.assertEqual(classify(100, 100), feedback.EQUAL)
        self.assertEqual(classify(100, 1), feedback.GREATER_FAR)
        self.assertEqual(classify(1, 100), feedback.LESS_FAR)

    def test_outside_secret_range_still_classified(self):
        self.assertEqual(classify(0, 1), feedback.LESS_NEAR)
        self.assertEqual(classify(255, 100), feedback.GREATER_FAR)

    def test_result_is_always_a_known_bucket(self):
        for g in (0, 1, 37, 99, 255):
            self.assertIn(classify(g, 50), feedback.BUCKETS)


class TestMessagePools(unittest.TestCase):

    def test_every_miss_bucket_has_hints(self):
        for bucket in feedback.BUCKETS:
            if bucket == feedback.EQUAL:
                self.assertNotIn(bucket, messages.HINTS)
            else:
                self.assertTrue(messages.HINTS[bucket])

    def test_pools_not_empty(self):
        for pool in (messages.BANNERS, messages.PROMPTS, messages.INVALID,
                     messages.VICTORY, messages.CLOSING):
            self.assertTrue(pool)

    def test_pick_returns_pool_member(self):
        rng = random.Random(7)
        for _ in range(50):
            self.assertIn(messages.pick(messages.PROMPTS, rng), messages.PROMPTS)

    def test_pick_without_rng(self):
        self.assertIn(messages.pick(messages.VICTORY), messages.VICTORY)

    def test_pick_reaches_every_entry(self):
        rng = random.Random(1)
        seen = {messages.pick(messages.INVALID, rng) for _ in range(500)}
        self.assertEqual(seen, set(messages.INVALID))


if __name__ == '__main__':
    unittest.main()
