"""Lazy, zero-copy enumeration of every contiguous window of a sequence."""

from importlib import metadata

from .config import GradientConfig, load_config, validate_config, validate_config_file
from .gradient import Gradient
from .indexing import span_at, total_windows, window_at
from .logging_utils import configure_logging, log_event
from .sources import load_source, parse_hex
from .views import WindowSpan, WindowView, make_view

try:
    __version__ = metadata.version("gradient-slice")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.1.0"

__all__ = [
    "Gradient",
    "WindowView",
    "WindowSpan",
    "make_view",
    "total_windows",
    "span_at",
    "window_at",
    "GradientConfig",
    "load_config",
    "validate_config",
    "validate_config_file",
    "load_source",
    "parse_hex",
    "configure_logging",
    "log_event",
    "__version__",
]
