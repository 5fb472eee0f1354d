import unittest
import tempfile
import os

import numpy as np
from pixcolor.flow import load_flow, save_flow, colorize_optical_flow, optical_flow_legend, LineStyle
from pixcolor.colormaps import get
from pixcolor.utils import ValidationError, FormatError

def make_flow(height=6, width=8):
    y, x = np.mgrid[:height,:width]
    return np.stack([x-width/2, y-height/2], -1).astype(np.float32)

class FloFileTests(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tempdir.cleanup()

    def _tempfile(self, basename):
        return os.path.join(self.tempdir.name, basename)

    def test_write_read(self):
        fname = self._tempfile("test.flo")
        data = make_flow()
        save_flow(fname, data)
        with open(fname, "rb") as f:
            raw = f.read()
        assert raw[:4] == b"PIEH"
        assert np.frombuffer(raw[:4], "<f4")[0] == 202021.25
        assert list(np.frombuffer(raw[4:12], "<i4")) == [8, 6]
        assert len(raw) == 12 + 6*8*2*4
        res = load_flow(fname)
        assert res.shape == (6, 8, 2)
        assert res.dtype == np.float32
        assert res.owns_data
        assert np.array_equal(np.asarray(res), data)

    def test_bad_files(self):
        fname = self._tempfile("bad.flo")
        with open(fname, "wb") as f:
            f.write(b"NOPE" + np.array([2, 2], "<i4").tobytes() + np.zeros(8, "<f4").tobytes())
        with self.assertRaises(FormatError):
            load_flow(fname)
        with open(fname, "wb") as f:
            f.write(b"PIEH" + np.array([4, 4], "<i4").tobytes() + np.zeros(8, "<f4").tobytes())
        with self.assertRaises(FormatError):
            load_flow(fname)
        with open(fname, "wb") as f:
            f.write(b"PIEH" + np.array([0, 4], "<i4").tobytes())
        with self.assertRaises(FormatError):
            load_flow(fname)
        with self.assertRaises(ValueError):
            load_flow(fname)

    def test_save_validation(self):
        with self.assertRaises(ValidationError):
            save_flow(self._tempfile("x.flo"), np.zeros((2, 2, 2), np.int32))
        with self.assertRaises(ValidationError):
            save_flow(self._tempfile("x.flo"), np.zeros((2, 2, 3), np.float32))

class ColorizeFlowTests(unittest.TestCase):
    def test_zero_flow_is_white(self):
        res = np.asarray(colorize_optical_flow(np.zeros((3, 4, 2), np.float32)))
        assert res.shape == (3, 4, 3)
        assert np.all(res == 255)

    def test_direction_and_saturation(self):
        data = np.zeros((1, 3, 2), np.float64)
        data[0,0] = [2, 0]
        data[0,1] = [1, 0]
        data[0,2] = [0, 0]
        res = np.asarray(colorize_optical_flow(data, "optical-flow"))
        wheel = get("optical-flow").table
        assert np.array_equal(res[0,0], wheel[0])
        assert np.all(res[0,1] >= res[0,0])
        assert np.all(res[0,2] == 255)
        # A fixed normalizer caps the radius at 1
        res = np.asarray(colorize_optical_flow(data, "optical-flow", motion_normalizer=1))
        assert np.array_equal(res[0,0], res[0,1])

    def test_hue_follows_angle(self):
        n = len(get("hsv"))
        angles = 2*np.pi*np.arange(4)/4
        data = np.stack([np.cos(angles), np.sin(angles)], -1)[None].astype(np.float32)
        res = np.asarray(colorize_optical_flow(data, "hsv", motion_normalizer=1))
        table = get("hsv").table
        for i in range(4):
            assert np.all(np.abs(res[0,i].astype(int) - table[i*n//4].astype(int)) <= 1)

    def test_invalid_vectors_are_black(self):
        data = make_flow()
        data[1,1,0] = np.nan
        res = np.asarray(colorize_optical_flow(data, output_channels=4))
        assert np.all(res[1,1,:3] == 0)
        assert np.all(res[:,:,3] == 255)

    def test_validation(self):
        with self.assertRaises(ValidationError):
            colorize_optical_flow(np.zeros((2, 2, 2), np.int16))
        with self.assertRaises(ValidationError):
            colorize_optical_flow(np.zeros((2, 2), np.float32))
        with self.assertRaises(ValidationError):
            colorize_optical_flow(make_flow(), output_channels=2)
        with self.assertRaises(ValidationError):
            colorize_optical_flow(make_flow(), motion_normalizer=0)

class LegendTests(unittest.TestCase):
    def test_clip_circle(self):
        res = np.asarray(optical_flow_legend(100, "hsv", clip_circle=True, output_channels=4))
        assert res.shape == (100, 100, 4)
        assert res[0,0,3] == 0
        assert res[99,99,3] == 0
        assert res[50,50,3] == 255
        assert res[:,:,3].min() == 0 and res[:,:,3].max() == 255

    def test_clip_needs_alpha(self):
        res = np.asarray(optical_flow_legend(100, "hsv", clip_circle=True, output_channels=3))
        assert res.shape == (100, 100, 3)
        res = np.asarray(optical_flow_legend(100, clip_circle=False, output_channels=4))
        assert np.all(res[:,:,3] == 255)

    def test_overlay(self):
        plain = np.asarray(optical_flow_legend(101, output_channels=3))
        lined = np.asarray(optical_flow_legend(101, line_style=LineStyle(1, "black"), output_channels=3))
        assert not np.all(plain[10,50] == 0)
        assert np.all(lined[10,50] == 0)
        assert np.all(lined[50,10] == 0)
        circled = np.asarray(optical_flow_legend(101, draw_circle=True, output_channels=3))
        assert np.all(circled[50,0] == 255)
        assert np.array_equal(circled[10,50], plain[10,50])

    def test_validation(self):
        for size in [0, 1]:
            with self.assertRaises(ValidationError):
                optical_flow_legend(size)
        with self.assertRaises(TypeError):
            optical_flow_legend(10.5)
        with self.assertRaises(ValidationError):
            optical_flow_legend(10, output_channels=5)
        with self.assertRaises(TypeError):
            optical_flow_legend(10, line_style="white")
        with self.assertRaises(ValidationError):
            LineStyle(0)
