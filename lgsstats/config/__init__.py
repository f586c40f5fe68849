from .config import EngineConfig, default_config, load_config, validate_config

__all__ = ["EngineConfig", "default_config", "load_config", "validate_config"]
