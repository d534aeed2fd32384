"""CPU benchmark building blocks: CRC helpers, matrix and state-machine workloads, timing and parallel contexts."""

__version__ = "1.0.0"
__all__ = ["crc", "matrix", "state", "timing", "parallel"]