import unittest

import numpy as np
from pixcolor import colormaps
from pixcolor.colormaps import Registry, Colorscheme, Category
from pixcolor.colors import Color
from pixcolor.utils import NotFoundError, CollisionError, ValidationError

class RegistryTests(unittest.TestCase):
    def test_builtins(self):
        reg = Registry()
        gray = reg.get("gray")
        assert len(gray) == 256
        assert gray.category is Category.SEQUENTIAL
        assert np.array_equal(gray.table[:,0], np.arange(256))
        assert gray[0] == Color(0, 0, 0) and gray[255] == Color(1, 1, 1)
        assert len(reg.get("category-10")) == 10
        assert len(reg.get("optical-flow")) == 55
        assert reg.get("hsv").category is Category.CYCLIC
        assert reg.get("hsv")[0] == Color(1, 0, 0)
        for cmap in reg:
            assert len(cmap) >= 2
            assert isinstance(cmap.category, Category)
        families = set(cmap.category for cmap in reg)
        assert families == set(Category)
        assert reg.is_builtin("viridis")

    def test_categorical_and_cyclic_are_short(self):
        reg = Registry()
        for cmap in reg:
            if cmap.category is Category.CATEGORICAL:
                assert len(cmap) < 256

    def test_name_normalization(self):
        reg = Registry()
        assert reg.get("Gray") is reg.get("GREY")
        assert reg.get("black_body") is reg.get("Black-Body")
        assert reg.get("hot") is reg.get("black body")
        assert reg.get("TAB10") is reg.get("category10")
        assert reg.get("yarg")[0] == Color(1, 1, 1)
        assert "orientation_6" in reg
        assert "nosuchmap" not in reg

    def test_not_found(self):
        reg = Registry()
        with self.assertRaises(NotFoundError):
            reg.get("nosuchmap")
        with self.assertRaises(KeyError):
            reg.get("nosuchmap")
        empty = Registry(builtins=False)
        assert len(empty) == 0
        with self.assertRaises(NotFoundError):
            colormaps.resolve("gray", empty)

    def test_register_once(self):
        reg = Registry()
        n = len(reg)
        cmap = reg.register("my-map", ["red", "#00ff00", (0, 0, 255)], Category.CATEGORICAL)
        assert len(reg) == n+1
        assert reg.get("MY_MAP") is cmap
        assert not reg.is_builtin("my-map")
        assert cmap[1] == Color(0, 1, 0)
        for name in ["my-map", "mymap", "gray", "Viridis", "hot", "grey"]:
            with self.assertRaises(CollisionError):
                reg.register(name, ["black", "white"])
        assert len(reg) == n+1
        assert reg.get("gray")[255] == Color(1, 1, 1)

    def test_register_invalid(self):
        reg = Registry(builtins=False)
        with self.assertRaises(ValidationError):
            reg.register("single", ["red"])
        with self.assertRaises(ValidationError):
            reg.register("bad", ["red", "nosuchcolor"])
        with self.assertRaises(ValidationError):
            reg.register("", ["red", "blue"])
        assert len(reg) == 0
        reg.register("single", ["red", "blue"], "diverging")
        assert reg.get("single").category is Category.DIVERGING

    def test_registries_are_independent(self):
        a, b = Registry(), Registry()
        a.register("only-in-a", ["red", "blue"])
        assert "only-in-a" in a
        assert "only-in-a" not in b
        assert "only-in-a" not in colormaps.default_registry

    def test_tables_are_immutable(self):
        gray = Registry().get("gray")
        with self.assertRaises(ValueError):
            gray.table[0,0] = 1
        for attr, value in [("name", "other"), ("category", Category.CYCLIC), ("table", np.zeros((2,3), np.uint8))]:
            with self.assertRaises(AttributeError):
                setattr(gray, attr, value)
        assert gray.name == "gray" and len(gray) == 256
        rev = gray.reversed()
        assert rev[0] == Color(1, 1, 1)
        assert gray[0] == Color(0, 0, 0)

class ColorschemeTests(unittest.TestCase):
    def test_parse_and_interpolate(self):
        scheme = Colorscheme("1:ffffff,0:000000")
        assert np.array_equal(scheme.vals, [0, 1])
        cols = scheme.interpolate([0, 0.5, 1, 2])
        assert list(cols[:,0]) == [0, 128, 255, 255]
        assert np.all(cols[:,3] == 255)
        rev = scheme.reverse()
        assert rev.interpolate([0])[0,0] == 255

    def test_cyclic_sampling(self):
        scheme = Colorscheme("0:ff0000,0.5:0000ff,1:ff0000")
        cols = scheme.sample(4, cyclic=True)
        assert len(cols) == 4
        assert list(cols[2,:3]) == [0, 0, 255]
        assert not np.array_equal(cols[0], cols[-1])

    def test_invalid(self):
        for desc in ["0:ff", "x:ffffff", "0:ffffff:1"]:
            with self.assertRaises(ValidationError):
                Colorscheme(desc)

class MatplotlibTests(unittest.TestCase):
    def test_to_mpl_colormap(self):
        cmap = colormaps.to_mpl_colormap("viridis")
        assert cmap.N == 256
        assert cmap.name == "viridis"
        rgba = cmap(0.0)
        assert np.allclose(rgba[:3], colormaps.get("viridis").table[0]/255)

    def test_mpl_register(self):
        import matplotlib
        reg = Registry(builtins=False)
        reg.register("pixcolor-test-stripes", ["red", "white", "blue"])
        added = colormaps.mpl_register(registry=reg)
        assert added == ["pixcolor-test-stripes"]
        assert "pixcolor-test-stripes" in matplotlib.colormaps
        assert colormaps.mpl_register(registry=reg) == []
