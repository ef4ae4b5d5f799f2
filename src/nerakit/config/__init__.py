"""Config loading exports."""

from nerakit.config.loader import load_config

__all__ = ["load_config"]
