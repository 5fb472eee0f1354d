import unittest
import tempfile
import os

from pixcolor import config

class ConfigTests(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        config.default("test_level", 3, "A parameter used by the config tests")
        config.default("test_label", "abc")

    def tearDown(self):
        self.tempdir.cleanup()
        for name in ["test_level", "test_label", "test_flag"]:
            config.parameters.pop(name, None)

    def _tempfile(self, basename):
        return os.path.join(self.tempdir.name, basename)

    def test_get(self):
        assert config.get("test_level") == 3
        assert config.get("test_level", 7) == 7
        assert config.get("bins") == 0
        with self.assertRaises(KeyError):
            config.get("no_such_parameter")

    def test_default_keeps_value(self):
        config.set("test_level", 5)
        config.default("test_level", 4)
        assert config.get("test_level") == 5

    def test_override(self):
        with config.override("test_level", 10):
            assert config.get("test_level") == 10
        assert config.get("test_level") == 3
        with config.override("test_flag", True):
            assert config.get("test_flag")
        assert "test_flag" not in config.parameters

    def test_save_load(self):
        fname = self._tempfile("pixcolorrc")
        config.save(fname)
        with open(fname) as f:
            text = f.read()
        assert "# A parameter used by the config tests\ntest_level = 3\n" in text
        assert "test_label = 'abc'" in text
        with open(fname, "w") as f:
            f.write("# changed\ntest_level = 8\ntest_label = \"xyz\"\n")
        config.load(fname)
        assert config.get("test_level") == 8
        assert config.get("test_label") == "xyz"
        assert config.parameters["test_level"]["desc"] == "changed"

    def test_set_beats_files(self):
        config.set("test_level", 9)
        config.from_str("test_level = 2")
        assert config.get("test_level") == 9

    def test_from_str_errors(self):
        for line in ["test_level 3", "test_level = 1 = 2", "test_label = abc", "test_level = x"]:
            with self.assertRaises(ValueError):
                config.from_str(line)

    def test_init(self):
        fname = self._tempfile("rc")
        with open(fname, "w") as f:
            f.write("test_level = 6\n")
        config.init(fname=fname)
        assert config.get("test_level") == 6
        config.init(fname=self._tempfile("missing"))
        with self.assertRaises(FileNotFoundError):
            config.init(fname=self._tempfile("missing"), must_exist=True)

    def test_argument_parser(self):
        parser = config.ArgumentParser(fname=self._tempfile("missing"))
        parser.add_argument("ifile")
        args = parser.parse_args(["foo.npy", "--test-level", "12"])
        assert args.ifile == "foo.npy"
        assert not hasattr(args, "test_level")
        assert not hasattr(args, "bins")
        assert config.get("test_level") == 12
