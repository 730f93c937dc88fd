"""Building blocks for VNC clients: DES, Diffie-Hellman, audio formats and coroutines."""

__version__ = "0.1.0"
__all__ = ["audio", "coroutine", "d3des", "dh"]