import unittest
import numpy as np

from pyrefframe.coordinate import Coordinate
from pyrefframe.core.exceptions import FrameMismatchError
from pyrefframe.reference_frame import (
    ReferenceFrame, TimeDependentHelmertParams, Transformation, builtin_transformations
)


class TestTransformation(unittest.TestCase):

    def setUp(self):
        self.params = TimeDependentHelmertParams(
            epoch=2015.0, tx=-1.4, ty=-0.9, ty_dot=-0.1, tz=1.4, tz_dot=0.2, s=-0.42)
        self.transformation = Transformation(ReferenceFrame.ITRF2020, ReferenceFrame.ITRF2014, self.params)
        self.coord = Coordinate.with_velocity(
            ReferenceFrame.ITRF2020,
            [4027894.006, 307045.600, 4919474.910],
            [0.01, 0.2, 0.030],
            2000.0)

    def test_transform(self):
        result = self.transformation.transform(self.coord)

        self.assertEqual(result.reference_frame, ReferenceFrame.ITRF2014)
        self.assertEqual(result.epoch, 2000.0)
        np.testing.assert_allclose(result.position, [4027894.0029, 307045.6005, 4919474.9063], atol=1e-4)
        np.testing.assert_allclose(result.velocity, [0.0100, 0.1999, 0.0302], atol=1e-4)

    def test_transform_without_velocity(self):
        coord = Coordinate.without_velocity(ReferenceFrame.ITRF2020, self.coord.position, 2000.0)
        result = self.transformation.transform(coord)
        self.assertIsNone(result.velocity)
        np.testing.assert_allclose(result.position, [4027894.0029, 307045.6005, 4919474.9063], atol=1e-4)

    def test_frame_mismatch(self):
        coord = Coordinate.with_velocity(ReferenceFrame.ITRF2014, self.coord.position, self.coord.velocity, 2000.0)
        with self.assertRaises(FrameMismatchError) as cm:
            self.transformation.transform(coord)
        self.assertEqual(cm.exception.expected, ReferenceFrame.ITRF2020)
        self.assertEqual(cm.exception.actual, ReferenceFrame.ITRF2014)
        self.assertIsInstance(cm.exception, ValueError)

    def test_invert(self):
        inverted = self.transformation.invert()
        self.assertEqual(inverted.from_frame, ReferenceFrame.ITRF2014)
        self.assertEqual(inverted.to_frame, ReferenceFrame.ITRF2020)
        self.assertEqual(inverted.params, self.params.invert())
        self.assertEqual(inverted.invert(), self.transformation)

    def test_round_trip_at_reference_epoch(self):
        coord = self.coord.adjust_epoch(self.params.epoch)
        back = self.transformation.invert().transform(self.transformation.transform(coord))
        np.testing.assert_allclose(back.position, coord.position, atol=1e-3)
        np.testing.assert_allclose(back.velocity, coord.velocity, atol=1e-3)

    def test_frames_parsed_from_strings(self):
        transformation = Transformation("ITRF2020", "NAD83_CSRS", self.params)
        self.assertEqual(transformation.from_frame, ReferenceFrame.ITRF2020)
        self.assertEqual(transformation.to_frame, ReferenceFrame.NAD83_CSRS)
        self.assertEqual(str(transformation), "ITRF2020 -> NAD83(CSRS)")

    def test_rejects_self_transformation(self):
        with self.assertRaises(ValueError):
            Transformation(ReferenceFrame.ITRF2020, ReferenceFrame.ITRF2020, self.params)

    def test_rejects_bad_params(self):
        with self.assertRaises(TypeError):
            Transformation(ReferenceFrame.ITRF2020, ReferenceFrame.ITRF2014, self.params.to_dict())


class TestTransformationSerialization(unittest.TestCase):

    def test_builtin_round_trip_is_exact(self):
        for transformation in builtin_transformations():
            self.assertEqual(Transformation.from_dict(transformation.to_dict()), transformation)

    def test_to_dict(self):
        transformation = Transformation("ITRF2014", "NAD83_2011", TimeDependentHelmertParams(epoch=2010.0))
        data = transformation.to_dict()
        self.assertEqual(data['from'], "ITRF2014")
        self.assertEqual(data['to'], "NAD83(2011)")
        self.assertEqual(data['params']['epoch'], 2010.0)

    def test_from_dict_aliases(self):
        params = TimeDependentHelmertParams(epoch=2010.0, tx=1.0).to_dict()
        expected = Transformation("ITRF2014", "MyFrame", TimeDependentHelmertParams(epoch=2010.0, tx=1.0))

        for from_key, to_key in [('source', 'destination'), ('source_name', 'destination_name')]:
            data = {from_key: "ITRF2014", to_key: "MyFrame", 'params': params}
            self.assertEqual(Transformation.from_dict(data), expected)

    def test_from_dict_custom_frame(self):
        params = TimeDependentHelmertParams(epoch=2010.0).to_dict()
        transformation = Transformation.from_dict({'from': "LocalA", 'to': "LocalB", 'params': params})
        self.assertTrue(transformation.from_frame.is_custom)
        self.assertEqual(transformation.to_dict()['to'], "LocalB")

    def test_from_dict_errors(self):
        params = TimeDependentHelmertParams(epoch=2010.0).to_dict()
        with self.assertRaises(ValueError):
            Transformation.from_dict({'to': "ITRF2014", 'params': params})
        with self.assertRaises(ValueError):
            Transformation.from_dict({'from': "ITRF2020", 'source': "ITRF2020", 'to': "ITRF2014",
                                      'params': params})
        with self.assertRaises(ValueError):
            Transformation.from_dict({'from': "ITRF2020", 'to': "ITRF2014"})
        with self.assertRaises(ValueError):
            Transformation.from_dict({'from': 2020, 'to': "ITRF2014", 'params': params})
        with self.assertRaises(ValueError):
            Transformation.from_dict(["ITRF2020", "ITRF2014"])


if __name__ == '__main__':
    unittest.main()
