"""Typed configuration over an enumerated key set.

Example:
    from envvars.config import TypedConfig

    class Keys(str, Enum):
        API_TOKEN = "API_TOKEN"
        PORT = "PORT"

    config = TypedConfig(Keys)
    config.assert_all_present()
    port = config.get(Keys.PORT, int)
"""

from envvars.config.typed_config import TypedConfig, key_name

__all__ = ["TypedConfig", "key_name"]
