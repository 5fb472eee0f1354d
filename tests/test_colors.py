import unittest

import numpy as np
from pixcolor import colors
from pixcolor.colors import Color, to_color, Named, Hex, Triple
from pixcolor.utils import ValidationError

class ColorTests(unittest.TestCase):
    def test_components(self):
        c = Color(1, 0.5, 0)
        assert (c.red, c.green, c.blue, c.alpha) == (1, 0.5, 0, 1)
        assert tuple(c) == (1, 0.5, 0, 1)
        assert c.to_rgb() == (255, 128, 0)
        assert c.to_hex() == "#ff8000ff"
        with self.assertRaises(ValidationError):
            Color(1.2, 0, 0)
        with self.assertRaises(AttributeError):
            c.red = 0

    def test_inverse(self):
        assert Color(1, 0, 0).inverse() == Color(0, 1, 1)
        assert Color(0, 0, 0).inverse() == Color(1, 1, 1)
        assert Color(1, 1, 1).inverse() == Color(0, 0, 0)
        assert Color(0.4, 0.4, 0.4, 0.5).inverse() == Color(1, 1, 1, 0.5)

    def test_scaling(self):
        c = Color(0.5, 0.25, 0.1, 0.3) * 2
        assert np.allclose(tuple(c), (1, 0.5, 0.2, 0.3))
        assert (Color(0.2, 0.2, 0.2)*0).to_rgb() == (0, 0, 0)

class SpecTests(unittest.TestCase):
    def test_names(self):
        navy = Color(0, 0, 0.5)
        for name in ["navy-blue", "navyblue", "NAVY_BLUE", "Navy Blue"]:
            assert to_color(name) == navy
        assert to_color("grey") == to_color("gray")
        assert len(colors.named_colors()) == 38

    def test_inverse_and_alpha(self):
        assert to_color("-red") == Color(0, 1, 1)
        assert to_color("!red") == Color(0, 1, 1)
        assert to_color("!black") == to_color("white")
        c = to_color("red!40")
        assert c.to_rgb() == (255, 0, 0)
        assert c.alpha == 0.4
        c = to_color("-blue!0")
        assert c == Color(1, 1, 0, 0)

    def test_invalid_strings(self):
        for spec in ["red!101", "red!x", "red!", "red!-5", "red!1!2", "nosuchcolor", "", "#ff00", "#gg0000"]:
            with self.assertRaises(ValidationError):
                to_color(spec)

    def test_hex(self):
        assert to_color("#ff0000") == Color(1, 0, 0)
        c = to_color("#00ff0080")
        assert c.to_rgba() == (0, 255, 0, 128)

    def test_triples(self):
        assert to_color((255, 0, 0)) == Color(1, 0, 0)
        assert to_color((1.0, 0, 0)) == Color(1, 0, 0)
        assert to_color([0, 0, 255, 51]).to_rgba() == (0, 0, 255, 51)
        assert to_color(np.array([0.5, 0.5, 0.5])) == Color(0.5, 0.5, 0.5)
        assert to_color(Triple((0, 255, 0))) == Color(0, 1, 0)
        with self.assertRaises(ValidationError):
            to_color((1, 2))
        with self.assertRaises(ValidationError):
            to_color((256, 0, 0))

    def test_closed_spec_types(self):
        assert to_color(Named("red", 50, True)) == Color(0, 1, 1, 0.5)
        assert to_color(Hex("#0000ff")) == Color(0, 0, 1)
        c = Color(0.1, 0.2, 0.3)
        assert to_color(c) is c
        for spec in [None, 3.5, {"r": 1}]:
            with self.assertRaises(TypeError):
                to_color(spec)
