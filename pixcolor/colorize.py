"""Transform scalar and label rasters into RGB(A) colors.

colorize_scaled maps values in a range [low,high] onto a fixed number of
color bins. colorize_labels assigns colors to integer ids by wrapping them
around the colormap table, so that the same id always gets the same color
no matter how large it is. colorize_scalars applies the colorize_scaled
rule to a plain list of numbers, returning Color values."""
import numpy as np, enum
from . import config, colormaps
from .buffer import PixelBuffer, Ownership, as_buffer
from .utils import ValidationError, ElementType, dispatch

config.default("colormap", "gray", "Default colormap used by colorize_scaled and colorize_scalars")
config.default("label_colormap", "category-20", "Default colormap used by colorize_labels")
config.default("bins", 0, "Default number of color levels used by colorize_scaled. 0 uses one level per colormap entry")
config.default("output_channels", 3, "Default number of channels (3 or 4) of colorized output")

def colorize_scaled(data, colormap=None, low=None, high=None, bins=None, output_channels=None, registry=None):
	"""Colorize the single-channel data into a new uint8 PixelBuffer.

	Values are clamped to [low,high] and split into bins equal-width levels,
	each of which is drawn with the colormap entry nearest to its relative
	position in the table. low and high default to the minimum and maximum
	of the data. NaN values get the lowest level. The result has
	output_channels (3 or 4) channels, with an opaque alpha channel in the
	latter case."""
	colormap        = config.get("colormap", colormap)
	output_channels = config.get("output_channels", output_channels)
	check_output_channels(output_channels)
	if bins is not None: check_bins(bins)
	buf  = single_channel(data)
	cmap = colormaps.resolve(colormap, registry)
	bins = resolve_bins(bins, cmap)
	vals = buf.array[:,:,0].astype(np.float64)
	low, high = resolve_limits(vals, low, high)
	lut  = bin_lookup(vals, low, high, bins, len(cmap))
	return lookup(cmap, lut, output_channels)

def colorize_labels(labels, colormap=None, output_channels=None, registry=None):
	"""Colorize an integer label image into a new uint8 PixelBuffer. Label L
	gets color number L mod N of the N entry colormap, counting from the
	start of the table also for negative labels. Labels that differ by a
	multiple of N thus always get the same color."""
	colormap        = config.get("label_colormap", colormap)
	output_channels = config.get("output_channels", output_channels)
	check_output_channels(output_channels)
	buf  = single_channel(labels)
	if not buf.element_type.integral:
		raise ValidationError("Labels must have an integer element type, got '%s'" % buf.element_type)
	cmap = colormaps.resolve(colormap, registry)
	lut  = label_index(buf.array[:,:,0], len(cmap))
	return lookup(cmap, lut, output_channels)

def colorize_scalars(values, colormap=None, low=None, high=None, bins=None, registry=None):
	"""Map a 1D sequence of numbers to a list of Color values, following the
	same binning rule as colorize_scaled."""
	colormap = config.get("colormap", colormap)
	if bins is not None: check_bins(bins)
	vals = np.asarray(values)
	if vals.ndim != 1:
		raise ValidationError("Expected a 1D sequence of values, got shape %s" % str(vals.shape))
	if vals.dtype.kind not in "uif":
		raise TypeError("Expected numeric values, got '%s'" % vals.dtype)
	cmap = colormaps.resolve(colormap, registry)
	bins = resolve_bins(bins, cmap)
	if len(vals) == 0: return []
	vals = vals.astype(np.float64)
	low, high = resolve_limits(vals, low, high)
	lut  = bin_lookup(vals, low, high, bins, len(cmap))
	return [cmap[i] for i in lut]

def check_output_channels(output_channels):
	if isinstance(output_channels, bool) or not isinstance(output_channels, (int, np.integer)):
		raise TypeError("Output channels must be an integer, got '%s'" % str(output_channels))
	if output_channels not in [3,4]:
		raise ValidationError("Output channels must be 3 or 4, got %d" % output_channels)

def check_bins(bins, ncolor=None):
	if isinstance(bins, bool) or not isinstance(bins, (int, np.integer)):
		raise TypeError("Number of bins must be an integer, got '%s'" % str(bins))
	if bins < 2:
		raise ValidationError("Number of bins must be at least 2, got %d" % bins)
	if ncolor is not None and bins > ncolor:
		raise ValidationError("Number of bins %d exceeds the %d colors of the colormap" % (bins, ncolor))

def resolve_bins(bins, cmap):
	"""Return the number of bins to use with cmap. None takes the configured
	default, where 0 means one bin per colormap entry."""
	if bins is None:
		bins = config.get("bins") or len(cmap)
	check_bins(bins, len(cmap))
	return bins

def single_channel(data):
	buf = as_buffer(data, disable_warnings=True)
	if buf.channels != 1:
		raise ValidationError("Expected single-channel data, got %d channels" % buf.channels)
	return buf

def unresolved(limit):
	return limit is None or not np.isfinite(limit)

def resolve_limits(vals, low, high):
	"""Replace unresolved (None or non-finite) limits by the minimum and
	maximum of the finite values in vals."""
	if unresolved(low) or unresolved(high):
		good = vals[np.isfinite(vals)]
		if good.size == 0:
			dmin, dmax = 0.0, 0.0
		else:
			dmin, dmax = float(good.min()), float(good.max())
		if unresolved(low):  low  = dmin
		if unresolved(high): high = dmax
	low, high = float(low), float(high)
	if low > high:
		raise ValidationError("Color range [%g,%g] has low above high" % (low, high))
	return low, high

def bin_lookup(vals, low, high, bins, n):
	"""Return the colormap entry for each value: the value is quantized into
	one of bins levels on [low,high], and the level is mapped to the nearest
	of the n table entries."""
	vals = np.where(np.isnan(vals), low, vals)
	vals = np.clip(vals, low, high)
	if high > low: t = (vals-low)/(high-low)
	else:          t = np.zeros(vals.shape)
	idx = np.clip(np.floor(t*bins), 0, bins-1)
	return np.floor(idx*(n-1)/(bins-1) + 0.5).astype(np.intp)

def _signed_index(labels, n):
	return np.mod(labels.astype(np.int64), np.int64(n)).astype(np.intp)

def _unsigned_index(labels, n):
	return np.mod(labels.astype(np.uint64), np.uint64(n)).astype(np.intp)

# np.mod follows the sign of the divisor, so signed labels wrap to [0,n)
# directly. Unsigned labels go through uint64 to avoid overflow in the
# narrow types and to keep uint64 values above 2**63 exact.
label_index_table = {
	ElementType.UINT8:  _unsigned_index,
	ElementType.UINT16: _unsigned_index,
	ElementType.UINT32: _unsigned_index,
	ElementType.UINT64: _unsigned_index,
	ElementType.INT16:  _signed_index,
	ElementType.INT32:  _signed_index,
	ElementType.INT64:  _signed_index,
}

def label_index(labels, n):
	"""Wrap integer labels into table indices in [0,n)."""
	return dispatch(label_index_table, ElementType.from_dtype(labels.dtype))(labels, n)

def lookup(cmap, lut, output_channels):
	res = np.empty(lut.shape + (output_channels,), np.uint8)
	res[...,:3] = cmap.table[lut]
	if output_channels == 4: res[...,3] = 255
	return PixelBuffer._wrap(res, Ownership.OWNED)

class LimitsMode(enum.Enum):
	FIXED      = "fixed"
	CONTINUOUS = "continuous"
	ONCE       = "once"

class Colorizer:
	"""Colorize a sequence of rasters with consistent settings. The mode
	controls the color range: FIXED always uses low and high, CONTINUOUS
	recomputes them from every input, and ONCE computes them from the first
	input and keeps them afterwards.

	 colorizer = Colorizer("viridis", LimitsMode.ONCE, bins=16)
	 for frame in frames: show(colorizer(frame))"""
	def __init__(self, colormap=None, mode=LimitsMode.CONTINUOUS, low=None, high=None, bins=None, output_channels=None, registry=None):
		self.registry        = registry
		self.colormap        = config.get("colormap", colormap)
		self.mode            = mode
		self.low, self.high  = low, high
		self.bins            = bins
		self.output_channels = config.get("output_channels", output_channels)
		self._check_limits()
	@property
	def colormap(self): return self._colormap
	@colormap.setter
	def colormap(self, colormap):
		cmap = colormaps.resolve(colormap, self.registry)
		if getattr(self, "_bins", None) is not None: check_bins(self._bins, len(cmap))
		self._colormap = cmap
	@property
	def mode(self): return self._mode
	@mode.setter
	def mode(self, mode):
		try: self._mode = LimitsMode(mode)
		except ValueError:
			raise ValidationError("Unknown limits mode '%s'" % str(mode))
	@property
	def bins(self): return self._bins
	@bins.setter
	def bins(self, bins):
		"""None uses the configured default, see resolve_bins."""
		if bins is not None: check_bins(bins, len(self.colormap))
		self._bins = bins
	@property
	def output_channels(self): return self._output_channels
	@output_channels.setter
	def output_channels(self, output_channels):
		check_output_channels(output_channels)
		self._output_channels = output_channels
	def _check_limits(self):
		if self.mode is LimitsMode.FIXED:
			if unresolved(self.low) or unresolved(self.high):
				raise ValidationError("Fixed limits mode needs finite low and high, got [%s,%s]" % (str(self.low), str(self.high)))
			if self.high <= self.low:
				raise ValidationError("Fixed limits mode needs low < high, got [%g,%g]" % (self.low, self.high))
	def __call__(self, data):
		self._check_limits()
		low, high = self.low, self.high
		if self.mode is LimitsMode.CONTINUOUS:
			low, high = None, None
		res = colorize_scaled(data, self.colormap, low, high, self.bins, self.output_channels, self.registry)
		if self.mode is LimitsMode.ONCE and (unresolved(self.low) or unresolved(self.high)):
			vals = single_channel(data).array[:,:,0].astype(np.float64)
			self.low, self.high = resolve_limits(vals, self.low, self.high)
		return res
	def __repr__(self):
		return "Colorizer(%s, %s, low=%s, high=%s, bins=%s, output_channels=%d)" % (self.colormap.name,
			self.mode.value, str(self.low), str(self.high), str(self.bins), self.output_channels)
