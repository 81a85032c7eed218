"""Autofill configuration management."""

from functools import lru_cache
from pathlib import Path

from .schemas import AutofillConfig
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'autofill_config.json'


@lru_cache(maxsize=1)
def get_config() -> AutofillConfig:
    """
    Load autofill configuration from data/autofill_config.json.

    Configuration is cached after first load. When the file does not
    exist, the schema defaults are used.

    Returns:
        AutofillConfig object with validated settings

    Raises:
        ValueError: If config file has invalid structure

    Example:
        from llautofill.config import get_config
        config = get_config()
        print(f"Fetching from: {config.base_url}")
    """
    if not CONFIG_PATH.exists():
        return AutofillConfig()
    return load_json(CONFIG_PATH, schema=AutofillConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
