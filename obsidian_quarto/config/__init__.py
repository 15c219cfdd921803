from .loader import load_config
from .models import OutputConfig, QuartoConfig

__all__ = [
    "OutputConfig",
    "QuartoConfig",
    "load_config",
]
