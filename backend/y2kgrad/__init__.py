"""Y2K grid gradient generator."""

from y2kgrad.engine.pipeline import GradientResult, compile_gradient, generate
from y2kgrad.models.gradient import DEFAULT_STOPS, GradientConfig, Stop

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "GradientResult",
    "compile_gradient",
    "generate",
    "DEFAULT_STOPS",
    "GradientConfig",
    "Stop",
]
