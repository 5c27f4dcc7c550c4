__version__ = "1.0.0"
__date__ = "2026-10-18"
