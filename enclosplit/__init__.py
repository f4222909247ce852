"""enclosplit - split strings on a separator, aware of quotes and brackets."""

from .enclosures import make_escapable
from .errors import ConfigurationError, EnclosplitError, ErrorKind, SplittingError
from .splitter import Splitter, new_splitter
from .splitter_config import SplitterConfig
from .stages.protocols import Policy
from .types import CapturedPart, Enclosure, Segment, SegmentKind

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "CapturedPart",
    "ConfigurationError",
    "Enclosure",
    "EnclosplitError",
    "ErrorKind",
    "Policy",
    "Segment",
    "SegmentKind",
    "Splitter",
    "SplitterConfig",
    "SplittingError",
    "make_escapable",
    "new_splitter",
]
