"""Relief shading: darken a colorized image according to a separate relief
(intensity or hillshade) map, so that a colored elevation or data map also
conveys the shape of the underlying surface."""
import numpy as np
from .buffer import PixelBuffer, Ownership, as_buffer
from .utils import ValidationError

def normalized_relief(buf):
	"""Return the single-channel relief buffer as float64 values in [0,1].
	The samples go through PixelBuffer.to_float, which divides integer types
	by 255, and are then clipped to [0,1]."""
	return np.clip(buf.to_float().array[:,:,0].astype(np.float64), 0, 1)

def relief_shading(relief, colorized):
	"""Multiply the color channels of the uint8 colorized image by the
	normalized relief, returning a new uint8 PixelBuffer. Scaling all color
	channels by the same factor keeps hue and saturation. The alpha channel
	of 4-channel images is copied unchanged."""
	relief = as_buffer(relief, disable_warnings=True)
	colorized = as_buffer(colorized, disable_warnings=True)
	if relief.channels != 1:
		raise ValidationError("Relief must have a single channel, got %d" % relief.channels)
	if colorized.element_type.value != "uint8":
		raise ValidationError("Colorized image must be uint8, got '%s'" % colorized.element_type)
	if colorized.channels not in [1,3,4]:
		raise ValidationError("Colorized image must have 1, 3 or 4 channels, got %d" % colorized.channels)
	if relief.shape[:2] != colorized.shape[:2]:
		raise ValidationError("Relief is %dx%d but the colorized image is %dx%d" % (relief.width, relief.height, colorized.width, colorized.height))
	shade = normalized_relief(relief)
	res   = colorized.array.copy()
	ncol  = 3 if colorized.channels == 4 else colorized.channels
	res[:,:,:ncol] = np.clip(np.round(res[:,:,:ncol]*shade[:,:,None]), 0, 255)
	return PixelBuffer._wrap(res, Ownership.OWNED)

def hillshade(elevation, azimuth=315, altitude=45, z_factor=1.0):
	"""Compute a float32 relief buffer in [0,1] from a single-channel
	elevation grid, lit from the given azimuth (degrees clockwise from up)
	and altitude (degrees above the horizon). Pixels are assumed square with
	unit spacing, and z_factor scales the elevations."""
	buf = as_buffer(elevation, disable_warnings=True)
	if buf.channels != 1:
		raise ValidationError("Elevation must have a single channel, got %d" % buf.channels)
	if not (0 <= altitude <= 90):
		raise ValidationError("Altitude must be in [0,90] degrees, got %s" % str(altitude))
	z = buf.array[:,:,0].astype(np.float64)*z_factor
	if min(z.shape) > 1:
		dzdy, dzdx = np.gradient(z)
	else:
		dzdy, dzdx = np.zeros(z.shape), np.zeros(z.shape)
	slope  = np.arctan(np.hypot(dzdx, dzdy))
	aspect = np.arctan2(dzdy, -dzdx)
	zenith = np.radians(90-altitude)
	az     = np.radians(360-azimuth+90)
	shade  = np.cos(zenith)*np.cos(slope) + np.sin(zenith)*np.sin(slope)*np.cos(az-aspect)
	return PixelBuffer._wrap(np.clip(shade, 0, 1)[:,:,None].astype(np.float32), Ownership.OWNED)
