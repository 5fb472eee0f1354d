"""Small helpers shared by the rest of pixcolor: the exception classes,
name normalization and the table of supported element types."""
import numpy as np, enum, os

class ValidationError(ValueError):
	"""Raised for malformed shapes, element types, ranges or enum arguments."""
	pass

class NotFoundError(KeyError):
	"""Raised when an unregistered colormap is referenced."""
	def __str__(self):
		return str(self.args[0]) if len(self.args) == 1 else KeyError.__str__(self)

class CollisionError(ValueError): pass
class FormatError(ValueError): pass

def normalize_name(name):
	"""Normalize a color or colormap name for lookup. Matching is case
	insensitive and ignores the separators '-', '_' and ' ', so that
	"navy-blue", "navyblue" and "NAVY_BLUE" all compare equal."""
	if not isinstance(name, str):
		raise TypeError("Expected a name string, got '%s'" % type(name).__name__)
	res = name.lower()
	for sep in "-_ ":
		res = res.replace(sep, "")
	return res

class ElementType(enum.Enum):
	"""The numeric sample types a PixelBuffer can hold. Each member carries
	the name of its canonical numpy dtype."""
	UINT8   = "uint8"
	INT16   = "int16"
	UINT16  = "uint16"
	INT32   = "int32"
	UINT32  = "uint32"
	INT64   = "int64"
	UINT64  = "uint64"
	FLOAT32 = "float32"
	FLOAT64 = "float64"

	@property
	def dtype(self): return np.dtype(self.value)
	@property
	def itemsize(self): return self.dtype.itemsize
	@property
	def integral(self): return np.issubdtype(self.dtype, np.integer)
	@property
	def signed(self): return np.issubdtype(self.dtype, np.signedinteger)
	@property
	def floating(self): return np.issubdtype(self.dtype, np.floating)

	@classmethod
	def from_dtype(cls, dtype):
		"""Look up the element type matching dtype, ignoring byte order.
		Raises ValidationError for unsupported types."""
		try: dtype = np.dtype(dtype)
		except TypeError:
			raise ValidationError("Unsupported element type '%s'" % str(dtype))
		for member in cls:
			if member.dtype.kind == dtype.kind and member.itemsize == dtype.itemsize: return member
		raise ValidationError("Unsupported element type '%s'" % str(dtype))

	def __str__(self):
		return self.dtype.name

def dispatch(table, etype):
	"""Return the entry of table registered for the given ElementType. Tables
	map ElementType members to the function implementing an operation for
	that type."""
	try:
		return table[etype]
	except KeyError:
		raise ValidationError("Operation not supported for element type '%s'" % str(etype))

def split_file_name(fname):
	"""Split a file name into directory, base name and extension,
	such that fname = dirname + "/" + basename + "." + ext."""
	dirname  = os.path.dirname(fname)
	if len(dirname) == 0: dirname = "."
	base_ext = os.path.basename(fname)
	dot      = base_ext.rfind(".")
	if dot < 0: dot = len(base_ext)
	return dirname, base_ext[:dot], base_ext[dot+1:]
