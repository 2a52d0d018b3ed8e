"""Tests for BurnInOffsetGenerator."""

import random
import unittest

from watchface.engine.offset import BurnInOffsetGenerator
from watchface.engine.state import BurnInOffset


class CountingRandom(random.Random):
    """Random source that counts offset samples."""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.samples = 0

    def randrange(self, *args, **kwargs):
        self.samples += 1
        return super().randrange(*args, **kwargs)


class TestBurnInOffsetGenerator(unittest.TestCase):
    """Test cases for burn-in offsets."""

    def test_offsets_stay_within_bound(self):
        """Test every sample stays strictly inside the configured bound."""
        for bound in (15, 30):
            generator = BurnInOffsetGenerator(max_offset=bound, rng=random.Random(7))
            offset = BurnInOffset()
            for _ in range(2000):
                offset = generator.next_frame(offset, ambient=True)
                self.assertLess(abs(offset.dx), bound)
                self.assertLess(abs(offset.dy), bound)

    def test_regenerates_once_per_thirty_frames(self):
        """Test offsets are re-sampled exactly once every 30 active frames."""
        rng = CountingRandom()
        generator = BurnInOffsetGenerator(every_frames=30, rng=rng)
        offset = BurnInOffset()

        for _ in range(29):
            offset = generator.next_frame(offset, ambient=False)
        self.assertEqual(rng.samples, 0)

        generator.next_frame(offset, ambient=False)
        self.assertEqual(rng.samples, 2)  # dx and dy

        for _ in range(60):
            generator.next_frame(offset, ambient=False)
        self.assertEqual(rng.samples, 6)

    def test_regenerates_every_frame_in_ambient(self):
        """Test ambient frames always re-sample."""
        rng = CountingRandom()
        generator = BurnInOffsetGenerator(rng=rng)
        offset = BurnInOffset()

        for _ in range(5):
            offset = generator.next_frame(offset, ambient=True)

        self.assertEqual(rng.samples, 10)

    def test_unchanged_frames_return_same_offset(self):
        """Test offsets are never drifted between re-samples."""
        generator = BurnInOffsetGenerator(rng=random.Random(3))
        start = BurnInOffset(4, -2)

        self.assertIs(generator.next_frame(start, ambient=False), start)

    def test_ambient_counter_reset(self):
        """Test an ambient re-sample restarts the 30-frame count."""
        rng = CountingRandom()
        generator = BurnInOffsetGenerator(every_frames=30, rng=rng)
        offset = BurnInOffset()

        for _ in range(20):
            generator.next_frame(offset, ambient=False)
        generator.next_frame(offset, ambient=True)
        for _ in range(29):
            generator.next_frame(offset, ambient=False)

        self.assertEqual(rng.samples, 2)


if __name__ == '__main__':
    unittest.main()
