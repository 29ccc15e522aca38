"""Document image binarization (Bernsen, Wan, Wolf), morphology, DRDM and PNM I/O."""

__version__ = "0.1.0"