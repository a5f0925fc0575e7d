from .logger import init_logging

__all__ = ["init_logging"]
