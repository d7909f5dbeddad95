"""Pure-Python MD5 and SHA-256 hashers and CPIO metadata stripping for reproducible boot images."""

__version__ = "0.1.0"
__all__ = ["cpio_strip", "md5", "sha256"]