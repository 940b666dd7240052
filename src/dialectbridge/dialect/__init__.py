"""SQL dialect plugin system for DialectBridge."""

# Import dialects to trigger registration
import dialectbridge.dialect.generic as _generic  # noqa: F401
import dialectbridge.dialect.h2 as _h2  # noqa: F401
from dialectbridge.dialect.base import Dialect
from dialectbridge.dialect.registry import DialectRegistry, UnsupportedDialectError
from dialectbridge.dialect.types import NativeType, NativeTypeCode

__all__ = [
    "Dialect",
    "DialectRegistry",
    "NativeType",
    "NativeTypeCode",
    "UnsupportedDialectError",
]
