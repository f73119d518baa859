from .console import cnsl, ecnsl, set_logger

__all__ = ['cnsl', 'ecnsl', 'set_logger']
