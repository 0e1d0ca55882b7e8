from admission_engine.config.settings import Settings, get_settings, configure_logging

__all__ = ["Settings", "get_settings", "configure_logging"]
