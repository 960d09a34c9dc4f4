"""Include guard checker for C/C++ headers."""

from hguard.config import GuardConfig, GuardStyle
from hguard.guards import Finding, StructuralWarning
from hguard.guards.check import check_guard
from hguard.guards.derive import derive_expected
from hguard.guards.strip import strip_source

__version__ = "0.1.0"

__all__ = [
    "Finding",
    "GuardConfig",
    "GuardStyle",
    "StructuralWarning",
    "__version__",
    "check_guard",
    "derive_expected",
    "strip_source",
]
