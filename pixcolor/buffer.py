"""The PixelBuffer class and helpers for creating buffers.

A PixelBuffer is a 2D grid of samples with one or more channels. It either
owns its memory, or borrows it from the array it was constructed from. In
the latter case every modification made through the buffer is visible in
the original array and vice versa. Borrowing requires the memory to be laid
out row by row with contiguous pixels, to use native byte order and to be
writable. When these conditions are not met the buffer silently falls back
to owning a copy, and emits a CopyWarning describing why."""
import numpy as np, warnings, enum
from . import config
from .utils import ValidationError, ElementType

config.default("buffer_copy_warnings", True, "Warn when a PixelBuffer that was asked to share memory had to copy it instead")

class CopyWarning(UserWarning): pass

class Ownership(enum.Enum):
	OWNED    = "owned"
	BORROWED = "borrowed"

class PixelBuffer:
	def __init__(self, data, copy=False, disable_warnings=False):
		"""Wrap data, which can be a PixelBuffer or anything numpy can turn
		into a [height,width] or [height,width,channels] array, in a PixelBuffer.

		With copy=True the samples are always copied into freshly allocated
		memory. With copy=False the buffer tries to share data's memory,
		falling back on a copy (with a CopyWarning unless disable_warnings is
		set) if that is not possible.

		Raises TypeError for None, and ValidationError for empty data, an
		unsupported element type or an unsupported number of dimensions."""
		if data is None:
			raise TypeError("Cannot construct a PixelBuffer from None")
		if isinstance(data, PixelBuffer):
			data = data._arr
		borrowable = isinstance(data, np.ndarray)
		arr = data if borrowable else np.asarray(data)
		if arr.ndim not in [2,3]:
			raise ValidationError("PixelBuffer data must be [height,width] or [height,width,channels], got shape %s" % str(arr.shape))
		if arr.size == 0:
			raise ValidationError("Cannot construct a PixelBuffer from empty data of shape %s" % str(arr.shape))
		self._etype = ElementType.from_dtype(arr.dtype)
		if arr.ndim == 2: arr = arr[:,:,None]
		if not copy and borrowable:
			problem = aliasing_problem(arr)
			if problem is None:
				self._arr, self._ownership = arr, Ownership.BORROWED
				return
			if not disable_warnings and config.get("buffer_copy_warnings"):
				warnings.warn("PixelBuffer could not share memory (%s), copying instead" % problem, CopyWarning, stacklevel=2)
		self._arr = np.empty(arr.shape, self._etype.dtype)
		self._arr[:] = arr
		self._ownership = Ownership.OWNED

	@classmethod
	def _wrap(cls, arr, ownership):
		"""Construct directly from a 3D array with a supported dtype, skipping validation."""
		res = cls.__new__(cls)
		res._arr, res._etype, res._ownership = arr, ElementType.from_dtype(arr.dtype), ownership
		return res

	# Geometry and layout
	@property
	def height(self): return self._arr.shape[0]
	@property
	def width(self): return self._arr.shape[1]
	@property
	def channels(self): return self._arr.shape[2]
	@property
	def shape(self):
		"""The (height, width, channels) of the buffer, also for single-channel data."""
		return self._arr.shape
	@property
	def element_type(self): return self._etype
	@property
	def dtype(self): return self._arr.dtype
	@property
	def itemsize(self): return self._arr.itemsize
	@property
	def row_stride(self): return self._arr.strides[0]
	@property
	def pixel_stride(self): return self._arr.strides[1]
	@property
	def ownership(self): return self._ownership
	@property
	def owns_data(self): return self._ownership is Ownership.OWNED
	@property
	def is_contiguous(self):
		return self.row_stride == self.width*self.channels*self.itemsize
	@property
	def array(self):
		"""The samples as a [height,width,channels] numpy array sharing our memory."""
		return self._arr
	@property
	def nbytes(self): return self._arr.nbytes
	def __array__(self, dtype=None, copy=None):
		if copy: return np.array(self._arr, dtype=dtype)
		if dtype is not None and np.dtype(dtype) != self._arr.dtype:
			if copy is False: raise ValueError("Converting a PixelBuffer to another dtype requires a copy")
			return self._arr.astype(dtype)
		return self._arr
	def __getitem__(self, sel): return self._arr[sel]
	def __setitem__(self, sel, val): self._arr[sel] = val
	def __repr__(self):
		return "PixelBuffer(%dx%dx%d, %s, %s)" % (self.width, self.height, self.channels,
			self._etype, "copied memory" if self.owns_data else "shared memory")
	def __eq__(self, other):
		if not isinstance(other, PixelBuffer): return NotImplemented
		return self.shape == other.shape and self.dtype == other.dtype and np.array_equal(self._arr, other._arr)
	__hash__ = None

	def copy(self):
		"""Return a deep copy which owns its memory."""
		return PixelBuffer._wrap(self._arr.copy(), Ownership.OWNED)

	# Channel handling
	def to_channels(self, n):
		"""Return an owned copy with n channels. Single-channel buffers are
		replicated into RGB, an opaque alpha channel is appended when going
		to 4 channels and alpha is dropped when going from 4 to 3. Only
		1, 3 and 4 channel inputs and n in {3,4} are supported."""
		if n not in [3,4] or self.channels not in [1,3,4]:
			raise ValidationError("Cannot convert a %d-channel buffer to %s channels" % (self.channels, str(n)))
		res = np.empty(self.shape[:2]+(n,), self.dtype)
		res[:,:,:3] = self._arr[:,:,:3]
		if n == 4:
			res[:,:,3] = self._arr[:,:,3] if self.channels == 4 else opaque_value(self._etype)
		return PixelBuffer._wrap(res, Ownership.OWNED)
	def to_rgb(self): return self.to_channels(3)
	def to_rgba(self): return self.to_channels(4)
	def swap_channels(self, ch1, ch2):
		"""Swap two channels in place. Aliases see the change."""
		for ch in [ch1, ch2]:
			check_channel(ch, self.channels)
		if ch1 != ch2:
			self._arr[:,:,[ch1,ch2]] = self._arr[:,:,[ch2,ch1]]
		return self
	def channel(self, ch):
		"""Return an owned single-channel copy of the given channel."""
		check_channel(ch, self.channels)
		return PixelBuffer._wrap(self._arr[:,:,ch:ch+1].copy(), Ownership.OWNED)

	# Views and in-place operations
	def roi(self, left, top, width, height):
		"""Return a PixelBuffer viewing the given rectangle of this buffer.
		Modifications made through the view are visible in this buffer."""
		if width <= 0 or height <= 0:
			raise ValidationError("Region of interest must have a positive size, got %dx%d" % (width, height))
		if left < 0 or top < 0 or left+width > self.width or top+height > self.height:
			raise ValidationError("Region of interest (%d,%d,%d,%d) exceeds the %dx%d buffer" % (left, top, width, height, self.width, self.height))
		return PixelBuffer._wrap(self._arr[top:top+height,left:left+width], Ownership.BORROWED)
	def pixelate(self, block_width, block_height):
		"""Replace each block_width x block_height block by the value of
		its top-left pixel, in place. Blocks at the right and bottom edges
		may be smaller than the others."""
		for n in [block_width, block_height]:
			if not isinstance(n, (int, np.integer)):
				raise TypeError("Pixelation block sizes must be integers, got '%s'" % str(n))
		if block_width < 1 or block_height < 1:
			raise ValidationError("Pixelation blocks must be at least 1x1, got %sx%s" % (str(block_width), str(block_height)))
		rows = np.arange(self.height)//block_height*block_height
		cols = np.arange(self.width)//block_width*block_width
		self._arr[:] = self._arr[rows[:,None],cols[None,:]]
		return self
	def dim(self, alpha):
		"""Return an owned copy with all color channels scaled by alpha in [0,1].
		The alpha channel of 4-channel buffers is left alone."""
		if not (0 <= alpha <= 1):
			raise ValidationError("Dimming factor must be in [0,1], got %s" % str(alpha))
		res = self.copy()
		ncol = 3 if self.channels == 4 else self.channels
		res._arr[:,:,:ncol] = saturate(self._arr[:,:,:ncol]*alpha, self._etype)
		return res
	def blend(self, other, alpha):
		"""Return (1-alpha)*self + alpha*other as a new owned buffer."""
		other = as_buffer(other)
		if other.shape != self.shape or other.dtype != self.dtype:
			raise ValidationError("Cannot blend %r with %r" % (self, other))
		if not (0 <= alpha <= 1):
			raise ValidationError("Blend weight must be in [0,1], got %s" % str(alpha))
		res = (1-alpha)*self._arr.astype(np.float64) + alpha*other._arr.astype(np.float64)
		return PixelBuffer._wrap(saturate(res, self._etype), Ownership.OWNED)

	# Type conversion
	def as_type(self, dtype, scale=1.0):
		"""Return an owned copy converted to dtype after multiplying by scale.
		Integer results are rounded and saturated to the range of the type."""
		etype = ElementType.from_dtype(dtype)
		if scale == 1 and etype is self._etype: return self.copy()
		vals  = self._arr.astype(np.float64)*scale
		return PixelBuffer._wrap(saturate(vals, etype), Ownership.OWNED)
	def to_float(self):
		"""Convert to float32. Integer samples are divided by 255."""
		return self.as_type(np.float32, 1/255 if self._etype.integral else 1.0)
	def to_uint8(self):
		"""Convert to uint8. Floating point samples are multiplied by 255."""
		return self.as_type(np.uint8, 255.0 if self._etype.floating else 1.0)

	# Statistics
	def min_max(self, channel=0):
		"""Return (min, max, (x,y) of min, (x,y) of max) for the given channel."""
		check_channel(channel, self.channels)
		vals = self._arr[:,:,channel]
		imin, imax = np.unravel_index(np.nanargmin(vals), vals.shape), np.unravel_index(np.nanargmax(vals), vals.shape)
		return vals[imin].item(), vals[imax].item(), (int(imin[1]),int(imin[0])), (int(imax[1]),int(imax[0]))
	def magnitude(self):
		"""Per-pixel euclidean norm of a 2-channel floating point buffer."""
		u, v = self._vector_components()
		return PixelBuffer._wrap(np.hypot(u, v)[:,:,None].astype(self.dtype), Ownership.OWNED)
	def orientation(self):
		"""Per-pixel angle atan2(channel 1, channel 0) of a 2-channel floating point buffer."""
		u, v = self._vector_components()
		return PixelBuffer._wrap(np.arctan2(v, u)[:,:,None].astype(self.dtype), Ownership.OWNED)
	def _vector_components(self):
		if self.channels != 2 or not self._etype.floating:
			raise ValidationError("Expected a 2-channel floating point buffer, got %r" % self)
		return self._arr[:,:,0], self._arr[:,:,1]

def aliasing_problem(arr):
	"""Return a description of why the [height,width,channels] array arr
	cannot be borrowed by a PixelBuffer, or None if it can."""
	sh, sr, sp, sc = arr.itemsize, *arr.strides
	if (arr.shape[2] > 1 and sc != sh) or (arr.shape[1] > 1 and sp != arr.shape[2]*sh) or (arr.shape[0] > 1 and sr < arr.shape[1]*arr.shape[2]*sh):
		return "not row-major"
	if not arr.dtype.isnative:
		return "not native byte order"
	if not arr.flags.writeable:
		return "not writable"
	return None

def check_channel(ch, nchannel):
	if isinstance(ch, (bool, np.bool_)) or not isinstance(ch, (int, np.integer)):
		raise TypeError("Channel index must be an integer, got '%s'" % str(ch))
	if ch < 0 or ch >= nchannel:
		raise ValidationError("Channel index %d out of range for %d channels" % (ch, nchannel))

def opaque_value(etype):
	"""The sample value meaning fully opaque for the given element type."""
	return 1 if etype.floating else 255

def saturate(vals, etype):
	"""Round and clip float values into the range of etype, returning an
	array of that type."""
	if etype.floating: return np.asarray(vals, etype.dtype)
	info = np.iinfo(etype.dtype)
	vals = np.clip(np.round(vals), info.min, info.max)
	return vals.astype(etype.dtype)

def as_buffer(data, disable_warnings=False):
	"""Return data as a PixelBuffer, sharing memory where possible."""
	if isinstance(data, PixelBuffer): return data
	return PixelBuffer(data, copy=False, disable_warnings=disable_warnings)

def from_array(data, copy=False, disable_warnings=False):
	return PixelBuffer(data, copy=copy, disable_warnings=disable_warnings)

def empty(height, width, channels=1, dtype=np.uint8):
	"""Allocate an owned, uninitialized buffer."""
	etype = ElementType.from_dtype(dtype)
	if height < 1 or width < 1 or channels < 1:
		raise ValidationError("Cannot allocate a %sx%sx%s buffer" % (str(width), str(height), str(channels)))
	return PixelBuffer._wrap(np.empty((height,width,channels), etype.dtype), Ownership.OWNED)

def zeros(height, width, channels=1, dtype=np.uint8):
	"""Allocate an owned buffer filled with zeros."""
	res = empty(height, width, channels, dtype)
	res.array[:] = 0
	return res

def full(height, width, value, channels=1, dtype=np.uint8):
	res = empty(height, width, channels, dtype)
	res.array[:] = value
	return res

def peaks(height=256, width=256):
	"""Return a float64 [height,width,1] buffer sampling the "peaks" surface,
	a sum of gaussians with values roughly in [-6.5,8.1], over [-3,3)."""
	if height < 1 or width < 1:
		raise ValidationError("Cannot create a %sx%s peaks buffer" % (str(width), str(height)))
	y = -3 + 6*np.arange(height)/height
	x = -3 + 6*np.arange(width)/width
	x, y = np.meshgrid(x, y)
	z = 3*(1-x)**2*np.exp(-x**2-(y+1)**2) - 10*(x/5-x**3-y**5)*np.exp(-x**2-y**2) - np.exp(-(x+1)**2-y**2)/3
	return PixelBuffer._wrap(z[:,:,None], Ownership.OWNED)
