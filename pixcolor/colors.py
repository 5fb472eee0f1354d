"""RGBA color values and the parsing of color specifications.

A color can be specified in three ways, which together form the closed set
of accepted color specs:

 Named:  a catalog name like "navy-blue", optionally prefixed by "!" or "-"
         to request its complementary color, and optionally followed by
         "!alpha" with alpha an integer percentage, e.g. "-red!40".
 Hex:    "#rrggbb" or "#rrggbbaa".
 Triple: a sequence of 3 or 4 components. Integer components are on the
         0-255 scale, anything else is taken to be on the 0-1 scale.

Color instances pass through unchanged. Everything else is a TypeError."""
import numpy as np, collections
from .utils import ValidationError, normalize_name

class Color:
	"""An immutable RGBA color with components in [0,1]."""
	__slots__ = ("_rgba",)
	def __init__(self, red=0.0, green=0.0, blue=0.0, alpha=1.0):
		rgba = tuple(float(c) for c in (red, green, blue, alpha))
		for c in rgba:
			if not (0 <= c <= 1):
				raise ValidationError("Color components must be in [0,1], got %s" % str(rgba))
		object.__setattr__(self, "_rgba", rgba)
	def __setattr__(self, name, value):
		raise AttributeError("Color is immutable")
	red   = property(lambda self: self._rgba[0])
	green = property(lambda self: self._rgba[1])
	blue  = property(lambda self: self._rgba[2])
	alpha = property(lambda self: self._rgba[3])
	def __iter__(self): return iter(self._rgba)
	def __len__(self): return 4
	def __getitem__(self, i): return self._rgba[i]
	def __eq__(self, other):
		if not isinstance(other, Color): return NotImplemented
		return self._rgba == other._rgba
	def __hash__(self): return hash(self._rgba)
	def __repr__(self):
		return "Color(%.3g, %.3g, %.3g, %.3g)" % self._rgba
	def __mul__(self, scale):
		"""Scale the RGB components, saturating at 1. Alpha is unchanged."""
		rgb = np.clip(np.array(self._rgba[:3])*float(scale), 0, 1)
		return Color(*rgb, self.alpha)
	__rmul__ = __mul__
	def to_rgb(self):
		"""Return the color as a tuple of three 0-255 integers."""
		return self.to_rgba()[:3]
	def to_rgba(self):
		return tuple(int(round(c*255)) for c in self._rgba)
	def to_hex(self):
		return "#%02x%02x%02x%02x" % self.to_rgba()
	def with_alpha(self, alpha):
		return Color(self.red, self.green, self.blue, alpha)
	def is_shade_of_gray(self, eps=1e-6):
		return abs(self.red-self.green) < eps and abs(self.red-self.blue) < eps
	def inverse(self):
		"""The complementary color. Shades of gray have no useful complement,
		so dark grays map to white and light ones to black."""
		if self.is_shade_of_gray():
			v = 1.0 if self.red < 0.5 else 0.0
			return Color(v, v, v, self.alpha)
		return Color(1-self.red, 1-self.green, 1-self.blue, self.alpha)

# The named color catalog. Keys are given in their display form, lookups
# go through normalize_name.
catalog = {
	"black":         (0.00, 0.00, 0.00),
	"white":         (1.00, 1.00, 1.00),
	"gray":          (0.50, 0.50, 0.50),
	"red":           (1.00, 0.00, 0.00),
	"green":         (0.00, 1.00, 0.00),
	"blue":          (0.00, 0.00, 1.00),
	"azure":         (0.00, 0.50, 1.00),
	"bronze":        (0.80, 0.50, 0.20),
	"brown":         (0.53, 0.33, 0.04),
	"carrot":        (0.93, 0.57, 0.13),
	"copper":        (0.72, 0.45, 0.20),
	"crimson":       (0.60, 0.00, 0.00),
	"cyan":          (0.00, 1.00, 1.00),
	"forest-green":  (0.13, 0.55, 0.13),
	"freesia":       (0.97, 0.77, 0.14),
	"gold":          (1.00, 0.84, 0.00),
	"indigo":        (0.30, 0.00, 0.51),
	"ivory":         (1.00, 1.00, 0.94),
	"lavender":      (0.90, 0.90, 0.98),
	"light-blue":    (0.68, 0.85, 0.90),
	"lime-green":    (0.20, 0.80, 0.20),
	"magenta":       (1.00, 0.00, 1.00),
	"maroon":        (0.50, 0.00, 0.00),
	"midnight-blue": (0.10, 0.10, 0.44),
	"navy-blue":     (0.00, 0.00, 0.50),
	"olive":         (0.50, 0.50, 0.00),
	"orange":        (1.00, 0.65, 0.00),
	"orchid":        (0.86, 0.44, 0.84),
	"purple":        (0.63, 0.13, 0.94),
	"rose-red":      (1.00, 0.01, 0.24),
	"salmon":        (0.98, 0.50, 0.45),
	"silver":        (0.75, 0.75, 0.75),
	"spearmint":     (0.27, 0.69, 0.55),
	"tangerine":     (0.95, 0.52, 0.00),
	"taupe":         (0.28, 0.24, 0.20),
	"teal-green":    (0.00, 0.43, 0.36),
	"turquoise":     (0.19, 0.84, 0.78),
	"yellow":        (1.00, 1.00, 0.00),
}
aliases = {"grey": "gray"}
_lookup = {normalize_name(name): rgb for name, rgb in catalog.items()}
for _alias, _target in aliases.items():
	_lookup[normalize_name(_alias)] = catalog[_target]

def named_colors():
	"""Return the names of all catalog colors."""
	return list(catalog)

# The three kinds of color specification
Named  = collections.namedtuple("Named",  ["name", "alpha_percent", "inverse"])
Hex    = collections.namedtuple("Hex",    ["code"])
Triple = collections.namedtuple("Triple", ["components"])

def parse_spec(desc):
	"""Parse a color specification string into a Named or Hex spec."""
	desc = desc.strip()
	if len(desc) == 0:
		raise ValidationError("Empty color specification")
	if desc[0] == "#":
		return Hex(desc)
	inverse = desc[0] in "!-"
	if inverse: desc = desc[1:]
	toks = desc.split("!")
	if len(toks) > 2:
		raise ValidationError("Invalid color specification '%s'" % desc)
	alpha = None
	if len(toks) == 2:
		if not toks[1].isdigit():
			raise ValidationError("Alpha in color specification '%s' must be an integer percentage" % desc)
		alpha = int(toks[1])
		if alpha > 100:
			raise ValidationError("Alpha in color specification '%s' must be in [0,100]" % desc)
	return Named(toks[0], alpha, inverse)

def from_named(spec):
	try:
		rgb = _lookup[normalize_name(spec.name)]
	except KeyError:
		raise ValidationError("Unknown color name '%s'" % spec.name)
	res = Color(*rgb)
	if spec.inverse: res = res.inverse()
	if spec.alpha_percent is not None: res = res.with_alpha(spec.alpha_percent/100)
	return res

def from_hex(spec):
	code = spec.code.lstrip("#")
	if len(code) not in [6,8]:
		raise ValidationError("Hex color '%s' must have the form #rrggbb or #rrggbbaa" % spec.code)
	try:
		vals = [int(code[i:i+2],16) for i in range(0, len(code), 2)]
	except ValueError:
		raise ValidationError("Invalid hex color '%s'" % spec.code)
	return Color(*[v/255 for v in vals])

def from_triple(spec):
	comps = list(spec.components)
	if len(comps) not in [3,4]:
		raise ValidationError("A color needs 3 or 4 components, got %d" % len(comps))
	if all(isinstance(c, (int, np.integer)) and not isinstance(c, bool) for c in comps):
		for c in comps:
			if not (0 <= c <= 255):
				raise ValidationError("Integer color components must be in [0,255], got %s" % str(tuple(comps)))
		comps = [c/255 for c in comps]
	try:
		return Color(*comps)
	except (TypeError, ValueError) as e:
		if isinstance(e, ValidationError): raise
		raise TypeError("Color components must be numbers, got %s" % str(tuple(comps)))

def to_color(spec):
	"""Normalize any accepted color specification into a Color."""
	if isinstance(spec, Color):  return spec
	if isinstance(spec, str):    spec = parse_spec(spec)
	elif isinstance(spec, (tuple, list, np.ndarray)) and not isinstance(spec, (Named, Hex, Triple)):
		spec = Triple(tuple(np.asarray(spec).tolist()) if isinstance(spec, np.ndarray) else tuple(spec))
	if   isinstance(spec, Named):  return from_named(spec)
	elif isinstance(spec, Hex):    return from_hex(spec)
	elif isinstance(spec, Triple): return from_triple(spec)
	raise TypeError("Cannot interpret '%s' of type %s as a color" % (str(spec), type(spec).__name__))
