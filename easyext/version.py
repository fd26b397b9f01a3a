# Copyright© 1986-2024 Altair Engineering Inc.

__version__ = "1.0.0"
