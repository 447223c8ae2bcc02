import unittest
from datetime import datetime, timezone

import numpy as np

from pyrefframe.coordinate import Coordinate
from pyrefframe.core.time import GNSSTime
from pyrefframe.reference_frame import ReferenceFrame, TransformationRepository


class TestCoordinate(unittest.TestCase):

    def setUp(self):
        self.position = [4027894.006, 307045.600, 4919474.910]
        self.velocity = [0.01, 0.2, 0.030]
        self.coord = Coordinate.with_velocity(ReferenceFrame.ITRF2020, self.position, self.velocity, 2000.0)

    def test_accessors(self):
        self.assertEqual(self.coord.reference_frame, ReferenceFrame.ITRF2020)
        np.testing.assert_array_equal(self.coord.position, self.position)
        np.testing.assert_array_equal(self.coord.velocity, self.velocity)
        self.assertEqual(self.coord.epoch, 2000.0)

    def test_frame_from_string(self):
        coord = Coordinate("NAD83_2011", self.position, epoch=2010.0)
        self.assertEqual(coord.reference_frame, ReferenceFrame.NAD83_2011)
        self.assertIsNone(coord.velocity)

    def test_epoch_types(self):
        self.assertEqual(Coordinate("ITRF2020", self.position, epoch=2010).epoch, 2010.0)
        self.assertEqual(Coordinate("ITRF2020", self.position, epoch=np.float64(2010.5)).epoch, 2010.5)
        self.assertEqual(Coordinate("ITRF2020", self.position, epoch=datetime(2010, 1, 1)).epoch, 2010.0)
        self.assertAlmostEqual(
            Coordinate("ITRF2020", self.position, epoch=GNSSTime.from_utc_datetime(datetime(2010, 1, 1))).epoch,
            2010.0, places=9)

    def test_epoch_required(self):
        with self.assertRaises(ValueError):
            Coordinate(ReferenceFrame.ITRF2020, self.position)
        with self.assertRaises(TypeError):
            Coordinate(ReferenceFrame.ITRF2020, self.position, epoch="2010")

    def test_with_velocity_requires_velocity(self):
        with self.assertRaises(ValueError):
            Coordinate.with_velocity(ReferenceFrame.ITRF2020, self.position, None, 2010.0)

    def test_bad_vectors(self):
        with self.assertRaises(ValueError):
            Coordinate(ReferenceFrame.ITRF2020, [1.0, 2.0], epoch=2010.0)
        with self.assertRaises(ValueError):
            Coordinate(ReferenceFrame.ITRF2020, self.position, [[0.1, 0.2, 0.3]], 2010.0)

    def test_immutable(self):
        position = self.coord.position
        position[0] = 0.0
        self.assertEqual(self.coord.position[0], 4027894.006)

        source = np.array(self.position)
        coord = Coordinate.without_velocity(ReferenceFrame.ITRF2020, source, 2000.0)
        source[0] = 0.0
        self.assertEqual(coord.position[0], 4027894.006)

        with self.assertRaises(AttributeError):
            self.coord.epoch = 2001.0

    def test_adjust_epoch(self):
        adjusted = self.coord.adjust_epoch(2008.0)

        self.assertEqual(adjusted.epoch, 2008.0)
        self.assertEqual(adjusted.reference_frame, ReferenceFrame.ITRF2020)
        np.testing.assert_allclose(adjusted.position, [4027894.086, 307047.2, 4919475.15], atol=1e-6)
        np.testing.assert_array_equal(adjusted.velocity, self.velocity)
        self.assertEqual(self.coord.epoch, 2000.0)

    def test_adjust_epoch_backwards(self):
        adjusted = self.coord.adjust_epoch(1990.0)
        np.testing.assert_allclose(adjusted.position, [4027893.906, 307043.6, 4919474.61], atol=1e-6)

    def test_adjust_epoch_without_velocity(self):
        coord = Coordinate.without_velocity(ReferenceFrame.ITRF2020, self.position, 2000.0)
        adjusted = coord.adjust_epoch(2020.0)

        self.assertEqual(adjusted, Coordinate.without_velocity(ReferenceFrame.ITRF2020, self.position, 2020.0))
        self.assertIsNone(adjusted.velocity)

    def test_adjust_epoch_with_datetime(self):
        adjusted = self.coord.adjust_epoch(datetime(2008, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(adjusted.epoch, 2008.0)

    def test_transform_to(self):
        repo = TransformationRepository.from_builtin()
        result = self.coord.transform_to(ReferenceFrame.ETRF2020, repo)

        self.assertEqual(result, repo.transform(self.coord, ReferenceFrame.ETRF2020))
        self.assertEqual(result.epoch, self.coord.epoch)

    def test_transform_to_uses_builtin_repository(self):
        repo = TransformationRepository.from_builtin()
        self.assertEqual(self.coord.transform_to("ETRF2020"),
                         self.coord.transform_to(ReferenceFrame.ETRF2020, repo))

    def test_equality(self):
        same = Coordinate.with_velocity(ReferenceFrame.ITRF2020, self.position, self.velocity, 2000.0)
        self.assertEqual(self.coord, same)
        self.assertNotEqual(self.coord, same.adjust_epoch(2001.0))
        self.assertNotEqual(self.coord, Coordinate.without_velocity(ReferenceFrame.ITRF2020, self.position, 2000.0))
        self.assertNotEqual(self.coord, Coordinate.with_velocity("ITRF2014", self.position, self.velocity, 2000.0))
        self.assertNotEqual(self.coord, "ITRF2020")

    def test_repr(self):
        self.assertIn("ReferenceFrame.ITRF2020", repr(self.coord))
        self.assertIn("epoch=2000.0", repr(self.coord))


if __name__ == '__main__':
    unittest.main()
