"""Pure-Python fixed-width unsigned big integers and the ChaCha20 stream cipher."""

__version__ = "0.1.0"