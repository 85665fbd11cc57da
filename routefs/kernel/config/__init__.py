"""Configuration models for routefs."""

from routefs.kernel.config.models import LoggingConfig, RouteFSConfig


def __getattr__(name: str) -> object:
    """Lazy imports for config loader symbols (they live in routefs.compiler.config_loader)."""
    _loader_names = {
        "ConfigLoader",
        "clear_config_cache",
        "get_default_config",
        "load_config",
    }
    if name in _loader_names:
        from routefs.compiler import config_loader

        return getattr(config_loader, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["LoggingConfig", "RouteFSConfig"]
