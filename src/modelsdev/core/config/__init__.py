"""modelsdev configuration system.

Configuration is read from a YAML file and ``MODELSDEV_*`` environment
variables, with ``${VAR}`` substitution and Pydantic validation.

Example usage:
```python
from modelsdev.core.config import get_config

config = get_config()
config.canonical_providers   # None unless overridden
config.logging.level
```
"""

from modelsdev._internal.exceptions import ConfigError

from .loader import default_config_path, get_config, load_config, reset_config
from .schema import LoggingConfig, ModelsDevConfig

__all__ = [
    "ModelsDevConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
    "default_config_path",
    "ConfigError",
]
