# -*- coding: utf-8 -*-

"""Top-level package for pixcolor."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pixcolor")
except PackageNotFoundError:
    __version__ = "unknown"

__author__ = """pixcolor developers"""
__email__ = ''

from .utils import ValidationError, NotFoundError, CollisionError, FormatError, ElementType
from .colors import Color, to_color
from .buffer import PixelBuffer, Ownership, CopyWarning
from .colormaps import Colormap, Category, Registry, default_registry
from .colorize import colorize_scaled, colorize_labels, colorize_scalars, Colorizer, LimitsMode
from .flow import load_flow, save_flow, colorize_optical_flow, optical_flow_legend, LineStyle
from .relief import relief_shading, hillshade
