"""Optical flow fields: reading and writing .flo files, color coding flow
vectors and drawing the color wheel legend that explains the coding.

A flow field is a PixelBuffer with two floating point channels holding the
horizontal and vertical displacement of each pixel. The direction of a
vector selects the hue from a (normally cyclic) colormap, while its length
relative to the motion normalizer blends from white for no motion to the
full hue for motions at or above the normalizer."""
import numpy as np, PIL.Image, PIL.ImageDraw
from . import config, colormaps
from .buffer import PixelBuffer, Ownership, as_buffer
from .colors import to_color
from .colorize import check_output_channels
from .utils import ValidationError, FormatError

config.default("flow_colormap", "optical-flow", "Default colormap used for optical flow visualization")

# 202021.25 as a little-endian float32
FLO_MAGIC = b"PIEH"

def load_flow(fname):
	"""Read a .flo file into a float32 [height,width,2] PixelBuffer. Raises
	FormatError if the file is not a valid .flo file."""
	with open(fname, "rb") as f:
		data = f.read()
	if len(data) < 12 or data[:4] != FLO_MAGIC:
		raise FormatError("'%s' is not a .flo file: bad magic tag" % fname)
	width, height = np.frombuffer(data[4:12], "<i4")
	if width < 1 or height < 1:
		raise FormatError("Invalid flow dimensions %dx%d in '%s'" % (width, height, fname))
	n = int(width)*int(height)*2
	if len(data) < 12 + 4*n:
		raise FormatError("Truncated flow data in '%s': expected %d values" % (fname, n))
	vals = np.frombuffer(data[12:12+4*n], "<f4").reshape(height, width, 2)
	return PixelBuffer._wrap(vals.astype(np.float32), Ownership.OWNED)

def save_flow(fname, flow):
	"""Write the 2-channel floating point flow field to fname in .flo format."""
	buf = flow_buffer(flow)
	with open(fname, "wb") as f:
		f.write(FLO_MAGIC)
		f.write(np.array([buf.width, buf.height], "<i4").tobytes())
		f.write(np.ascontiguousarray(buf.array, "<f4").tobytes())

def flow_buffer(flow):
	buf = as_buffer(flow, disable_warnings=True)
	if buf.channels != 2 or not buf.element_type.floating:
		raise ValidationError("Optical flow must be a 2-channel floating point buffer, got %r" % buf)
	return buf

def colorize_optical_flow(flow, colormap=None, motion_normalizer=None, output_channels=None, registry=None):
	"""Color code the flow field into a new uint8 PixelBuffer.

	The angle atan2(dy,dx) in [0,2pi) selects a position in the colormap,
	interpolating between neighboring entries and wrapping around at the end.
	The magnitude is divided by motion_normalizer, which defaults to the
	largest magnitude in the field, and capped at 1. Small motions are pale
	and large motions saturated. Vectors with non-finite components are black."""
	colormap        = config.get("flow_colormap", colormap)
	output_channels = config.get("output_channels", output_channels)
	check_output_channels(output_channels)
	if motion_normalizer is not None and not motion_normalizer > 0:
		raise ValidationError("Motion normalizer must be positive, got '%s'" % str(motion_normalizer))
	buf  = flow_buffer(flow)
	cmap = colormaps.resolve(colormap, registry)
	u, v = buf.array[:,:,0].astype(np.float64), buf.array[:,:,1].astype(np.float64)
	return flow_to_color(u, v, cmap, motion_normalizer, output_channels)

def flow_to_color(u, v, cmap, motion_normalizer, output_channels):
	bad  = ~(np.isfinite(u) & np.isfinite(v))
	u, v = np.where(bad, 0, u), np.where(bad, 0, v)
	mag  = np.hypot(u, v)
	if motion_normalizer is None:
		motion_normalizer = mag.max()
		if motion_normalizer == 0: motion_normalizer = 1
	rad  = np.minimum(mag/motion_normalizer, 1)
	n    = len(cmap)
	fk   = np.mod(np.arctan2(v, u), 2*np.pi)/(2*np.pi)*n
	k0   = np.floor(fk)
	frac = (fk-k0)[...,None]
	k0   = k0.astype(np.intp) % n
	k1   = (k0+1) % n
	table= cmap.table.astype(np.float64)
	col  = table[k0]*(1-frac) + table[k1]*frac
	col  = 255 - rad[...,None]*(255-col)
	res  = np.empty(u.shape + (output_channels,), np.uint8)
	res[...,:3] = np.clip(np.round(col), 0, 255)
	res[bad,:3] = 0
	if output_channels == 4: res[...,3] = 255
	return PixelBuffer._wrap(res, Ownership.OWNED)

class LineStyle:
	"""Width in pixels and color of the lines drawn on a flow legend."""
	def __init__(self, width=1, color="white"):
		if width < 1:
			raise ValidationError("Line width must be at least 1, got %s" % str(width))
		self.width = int(width)
		self.color = to_color(color)
	def __repr__(self):
		return "LineStyle(%d, %s)" % (self.width, self.color.to_hex())

def optical_flow_legend(size, colormap=None, draw_circle=False, clip_circle=False, line_style=None, output_channels=None, registry=None):
	"""Draw a size x size color wheel explaining the flow color coding. The
	direction from the center gives the motion direction and the distance
	from the center, relative to the inscribed circle, the motion magnitude.

	draw_circle outlines the unit circle, and line_style (a LineStyle) adds
	horizontal and vertical axes through the center. clip_circle makes
	everything outside the circle transparent, which is only possible when
	output_channels is 4."""
	colormap        = config.get("flow_colormap", colormap)
	output_channels = config.get("output_channels", output_channels)
	check_output_channels(output_channels)
	if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
		raise TypeError("Legend size must be an integer, got '%s'" % str(size))
	if size < 2:
		raise ValidationError("Legend size must be at least 2, got %d" % size)
	if line_style is not None and not isinstance(line_style, LineStyle):
		raise TypeError("line_style must be a LineStyle or None")
	cmap = colormaps.resolve(colormap, registry)
	coords = np.linspace(-1, 1, size)
	u, v   = np.meshgrid(coords, coords)
	res    = flow_to_color(u, v, cmap, 1.0, output_channels)
	if draw_circle or line_style is not None:
		draw_overlay(res.array, line_style or LineStyle(), circle=draw_circle, axes=line_style is not None)
	if clip_circle and output_channels == 4:
		res.array[u**2+v**2 > 1, 3] = 0
	return res

def draw_overlay(arr, line_style, circle=True, axes=True):
	"""Draw the legend circle and axes onto the uint8 [size,size,nc] array
	in place."""
	img  = PIL.Image.fromarray(arr)
	draw = PIL.ImageDraw.Draw(img)
	size = arr.shape[0]
	col  = line_style.color.to_rgba() if arr.shape[2] == 4 else line_style.color.to_rgb()
	if circle:
		draw.ellipse([0, 0, size-1, size-1], outline=col, width=line_style.width)
	if axes:
		mid = (size-1)/2
		draw.line([(0, mid), (size-1, mid)], fill=col, width=line_style.width)
		draw.line([(mid, 0), (mid, size-1)], fill=col, width=line_style.width)
	arr[:] = np.asarray(img)
