"""responsive-type: fluid font-size, line-height and letter-spacing for CSS."""

__version__ = "0.1.0"

from responsive_type.config import TransformConfig  # noqa: E402
from responsive_type.errors import (  # noqa: E402
    StylesheetParseError,
    TransformError,
    UnitlessSizeError,
)
from responsive_type.processor import ProcessResult, process_css, transform_root  # noqa: E402

__all__ = [
    "__version__",
    "TransformConfig",
    "ProcessResult",
    "process_css",
    "transform_root",
    "StylesheetParseError",
    "TransformError",
    "UnitlessSizeError",
]
