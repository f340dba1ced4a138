# fanlog/api_error/config_error.py
class ConfigurationError(RuntimeError):
    """
    Raised when fanlog configuration is invalid.
    """

    pass


__all__ = ["ConfigurationError"]
