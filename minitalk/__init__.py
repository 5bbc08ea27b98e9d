"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2."""

__version__ = "1.0.0"

__all__ = ["client", "compare", "errors", "printf", "protocol", "radix", "server", "textutil"]