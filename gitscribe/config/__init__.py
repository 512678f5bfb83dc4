from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import GitscribeConfig, LLMSettings

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "GitscribeConfig",
    "LLMSettings",
    "load_config",
]
