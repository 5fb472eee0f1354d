"""Command line front end: turn raster files into images.

 pixcolor data.npy -q 0.01 --colormap viridis
 pixcolor labels.npy --labels -o "{dir}/{base}_labels.{ext}"
 pixcolor frame.flo --legend 128

Each .npy input (a single-channel [ny,nx] or [ny,nx,1] array) is colorized
with colorize_scaled, or colorize_labels with --labels. Each .flo input is
color coded as optical flow. Images are written with PIL. The configuration
parameters (see config) are available as options too, for example --bins
and --output-channels."""
import numpy as np, sys, time, contextlib, PIL.Image
from . import config, colorize, flow, relief, buffer, utils

class Printer:
	"""Progress output for the command line tool. Messages are written to
	stream (stderr by default) when their level is at most our verbosity
	level, and are prefixed by the accumulated push prefixes."""
	def __init__(self, level=1, prefix="", stream=None):
		self.level  = level
		self.prefix = prefix
		self.stream = stream
	def write(self, desc, level, prepend=""):
		if level <= self.level:
			(self.stream or sys.stderr).write(prepend + self.prefix + desc + "\n")
	def push(self, desc):
		return Printer(self.level, self.prefix + desc, self.stream)
	@contextlib.contextmanager
	def time(self, desc, level):
		t1 = time.time()
		yield
		self.write(desc, level, prepend="%6.2f " % (time.time()-t1))
noprint = Printer(0)

def define_arg_parser():
	parser = config.ArgumentParser(name="pixcolor", description="Colorize scalar, label and optical flow rasters into images.")
	parser.add_argument("ifiles", nargs="+", help="The .npy or .flo files to colorize. Each is written to its own image file, see --oname.")
	parser.add_argument("-o", "--oname", default="{dir}/{base}.{ext}", help="The format of the output file names. Default is {dir}/{base}.{ext}")
	parser.add_argument("--ext", default="png", help="The output image format. Anything PIL can write.")
	parser.add_argument("--min", type=float, help="The value at which the color range starts.")
	parser.add_argument("--max", type=float, help="The value at which the color range ends.")
	parser.add_argument("-q", "--quantile", type=float, default=0, help="Quantile used for automatic color ranges: the range goes from quant(q) to quant(1-q). 0 uses the full data range.")
	parser.add_argument("-l", "--labels", action="store_true", help="Treat the input as integer labels.")
	parser.add_argument("-R", "--relief", type=str, default=None, help="A .npy elevation grid used to hillshade the colorized image.")
	parser.add_argument("--legend", type=int, default=0, help="For optical flow inputs, also write a color wheel legend of this size.")
	parser.add_argument("--motion-normalizer", type=float, default=None, help="Flow magnitude drawn at full saturation. Defaults to the largest magnitude.")
	parser.add_argument("-v", dest="verbosity", action="count", default=0, help="Verbose output. Specify multiple times to increase verbosity further.")
	return parser

def get_color_range(vals, vmin=None, vmax=None, quantile=0):
	"""Compute the [low,high] color range for the finite values in vals.
	Explicit vmin and vmax take precedence over the quantiles."""
	vals = np.sort(vals[np.isfinite(vals)])
	n    = len(vals)
	if n == 0: return vmin, vmax
	i    = min(n-1, int(round(n*quantile)))
	low  = vals[i]     if vmin is None else vmin
	high = vals[n-1-i] if vmax is None else vmax
	return float(low), float(high)

def read_raster(fname):
	"""Read a .npy or .flo file into a PixelBuffer."""
	if fname.endswith(".flo"):
		return flow.load_flow(fname)
	elif fname.endswith(".npy"):
		return buffer.PixelBuffer(np.load(fname), copy=True)
	else:
		raise utils.FormatError("Unrecognized input file type '%s'" % fname)

def colorize_file(fname, args, printer=noprint):
	"""Colorize the given file according to args, returning a list of
	(name, PixelBuffer) pairs, where name is a suffix for the output name."""
	with printer.time("read %s" % fname, 3):
		buf = read_raster(fname)
	if buf.channels == 2 and buf.element_type.floating:
		with printer.time("colorize flow", 3):
			res = [("", flow.colorize_optical_flow(buf, motion_normalizer=args.motion_normalizer))]
		if args.legend:
			res.append(("_legend", flow.optical_flow_legend(args.legend, clip_circle=True, output_channels=4)))
		return res
	if args.labels:
		with printer.time("colorize labels", 3):
			img = colorize.colorize_labels(buf)
	else:
		low, high = get_color_range(buf.array[:,:,0].astype(np.float64), args.min, args.max, args.quantile)
		printer.write("color range %s %s" % (str(low), str(high)), 2)
		with printer.time("colorize", 3):
			img = colorize.colorize_scaled(buf, low=low, high=high)
	if args.relief:
		with printer.time("relief shading", 3):
			img = relief.relief_shading(relief.hillshade(np.load(args.relief)), img)
	return [("", img)]

def write(fname, img, printer=noprint):
	"""Write a uint8 PixelBuffer with 3 or 4 channels to an image file."""
	with printer.time("write to %s" % fname, 3):
		PIL.Image.fromarray(np.ascontiguousarray(img.array)).save(fname)

def main(argv=None):
	args    = define_arg_parser().parse_args(argv)
	printer = Printer(args.verbosity)
	for ifile in args.ifiles:
		dirname, base, ext = utils.split_file_name(ifile)
		for suffix, img in colorize_file(ifile, args, printer=printer.push(ifile + " ")):
			oname = args.oname.format(dir=dirname, base=base+suffix, ext=args.ext)
			write(oname, img, printer=printer)
			printer.write(oname, 1)
	return 0

if __name__ == "__main__":
	sys.exit(main())
