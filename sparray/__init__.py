r"""
'    _____ ____  ___    ____  ____  ___  __  __
'   / ___// __ \/   |  / __ \/ __ \/   | \ \/ /
'   \__ \/ /_/ / /| | / /_/ / /_/ / /| |  \  /
'  ___/ / ____/ ___ |/ _, _/ _, _/ ___ |  / /
' /____/_/   /_/  |_/_/ |_/_/ |_/_/  |_| /_/
"""

import logging

# expose the main classes
from .sparray import Sparray, NumericSparray

# expose the factory functions
from .factories import (
    from_,
    from_range,
    repeat,
    fill_of,
    empty,
    is_sparray,
    S,
)

# expose supporting data classes
from .types import (
    IndexedValue,
    KeyValue,
    KeyValues,
    Bucket,
    IndexedMapping,
    GroupedMapping,
)

# expose errors
from .errors import (
    SparrayError,
    InvalidSparrayDataError,
    InvalidStepError,
    InvalidTimesError,
    InvalidWindowError,
    InvalidSampleSizeError,
    OversampleError,
    InvalidBinsError,
    InvalidHistogramRangeError,
    EmptyReduceError,
)

from .extensions.stats import render_histogram

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Sparray",
    "NumericSparray",
    "from_",
    "from_range",
    "repeat",
    "fill_of",
    "empty",
    "is_sparray",
    "S",
    "IndexedValue",
    "KeyValue",
    "KeyValues",
    "Bucket",
    "IndexedMapping",
    "GroupedMapping",
    "SparrayError",
    "InvalidSparrayDataError",
    "InvalidStepError",
    "InvalidTimesError",
    "InvalidWindowError",
    "InvalidSampleSizeError",
    "OversampleError",
    "InvalidBinsError",
    "InvalidHistogramRangeError",
    "EmptyReduceError",
    "render_histogram",
]
