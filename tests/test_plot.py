import unittest
import tempfile
import io
import os

import numpy as np
import PIL.Image
from pixcolor import plot
from pixcolor.flow import save_flow
from pixcolor.utils import FormatError

class PlotTests(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tempdir.cleanup()

    def _tempfile(self, basename):
        return os.path.join(self.tempdir.name, basename)

    def test_scalar_file(self):
        ifile = self._tempfile("ramp.npy")
        np.save(ifile, np.linspace(0, 1, 60).reshape(6, 10))
        assert plot.main([ifile]) == 0
        with PIL.Image.open(self._tempfile("ramp.png")) as img:
            assert img.size == (10, 6)
            arr = np.asarray(img)
        assert arr.shape == (6, 10, 3)
        assert np.all(arr[0,0] == 0)
        assert np.all(arr[-1,-1] == 255)

    def test_labels_and_output_name(self):
        ifile = self._tempfile("labels.npy")
        np.save(ifile, np.arange(12, dtype=np.int32).reshape(3, 4))
        oname = os.path.join(self.tempdir.name, "{base}_out.{ext}")
        plot.main([ifile, "-l", "-o", oname])
        with PIL.Image.open(self._tempfile("labels_out.png")) as img:
            assert img.size == (4, 3)

    def test_relief(self):
        ifile = self._tempfile("data.npy")
        rfile = self._tempfile("elev.npy")
        np.save(ifile, np.ones((5, 5)))
        np.save(rfile, np.zeros((5, 5)))
        plot.main([ifile, "-R", rfile])
        with PIL.Image.open(self._tempfile("data.png")) as img:
            arr = np.asarray(img)
        # Constant data maps to the first gray entry
        assert np.all(arr == 0)

    def test_flow_with_legend(self):
        ifile = self._tempfile("motion.flo")
        save_flow(ifile, np.ones((4, 7, 2), np.float32))
        plot.main([ifile, "--legend", "32"])
        with PIL.Image.open(self._tempfile("motion.png")) as img:
            assert img.size == (7, 4)
        with PIL.Image.open(self._tempfile("motion_legend.png")) as img:
            assert img.size == (32, 32)
            assert img.mode == "RGBA"

    def test_color_range(self):
        vals = np.array([np.nan, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9])
        assert plot.get_color_range(vals) == (0, 9)
        assert plot.get_color_range(vals, quantile=0.1) == (1, 8)
        assert plot.get_color_range(vals, vmin=-1, quantile=0.1) == (-1, 8)
        assert plot.get_color_range(np.array([np.nan])) == (None, None)

    def test_printer(self):
        out = io.StringIO()
        printer = plot.Printer(2, stream=out).push("a.npy ")
        printer.write("shown", 2)
        printer.write("hidden", 3)
        with printer.time("timed", 1):
            pass
        lines = out.getvalue().splitlines()
        assert lines[0] == "a.npy shown"
        assert len(lines) == 2
        assert lines[1].endswith("a.npy timed")
        plot.noprint.write("never", 1)

    def test_unknown_file_type(self):
        with self.assertRaises(FormatError):
            plot.read_raster(self._tempfile("image.txt"))
