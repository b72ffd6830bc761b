"""tw2css: convert utility class strings into readable CSS."""

from tw2css.core import CSSProcessor, build_resolver, convert
from tw2css.types import ConversionResult, ErrorKind, ProcessorConfig

__version__ = "0.1.0"

__all__ = [
    "CSSProcessor",
    "ConversionResult",
    "ErrorKind",
    "ProcessorConfig",
    "build_resolver",
    "convert",
    "__version__",
]
