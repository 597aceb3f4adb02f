from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import DirhashConfig, SigningConfig

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "DirhashConfig",
    "SigningConfig",
    "load_config",
]
