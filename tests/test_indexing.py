from x7.lib.annotations import tests
from x7.testing.extended import TestCaseExtended

import indexing
from gear_geometry import InvalidGearSpec
from indexing import index_angles


@tests(indexing.index_angles)
class TestIndexAngles(TestCaseExtended):
    SAVE_MATCH = False

    def test_example(self):
        angles = index_angles(20)
        self.assertEqual(20, len(angles))
        self.assertEqual(0.0, angles[0])
        self.assertEqual(18.0, angles[1])
        self.assertAlmostEqual(342.0, angles[-1])
        for tooth, angle in enumerate(angles):
            self.assertAlmostEqual(18.0 * tooth, angle)

    def test_gaps(self):
        for teeth in [3, 4, 7, 13, 20, 61, 127, 360]:
            with self.subTest(teeth=teeth):
                angles = index_angles(teeth)
                self.assertEqual(teeth, len(angles))
                gaps = [b - a for a, b in zip(angles, angles[1:])]
                for gap in gaps:
                    self.assertAlmostEqual(360 / teeth, gap)
                # The gap back to the first tooth closes the circle
                total = sum(gaps) + (angles[0] + 360 - angles[-1])
                self.assertAlmostEqual(360.0, total)

    def test_start_angle(self):
        angles = index_angles(4, start_angle=10.0)
        self.assertEqual((10.0, 100.0, 190.0, 280.0), angles)
        angles = index_angles(3, start_angle=-90.0)
        self.assertEqual((-90.0, 30.0, 150.0), angles)

    def test_absolute(self):
        # Large tooth counts don't accumulate error
        angles = index_angles(127)
        self.assertEqual(126 * (360 / 127), angles[-1])

    def test_invalid(self):
        with self.assertRaises(InvalidGearSpec):
            index_angles(2)
        with self.assertRaises(InvalidGearSpec):
            index_angles(0)
