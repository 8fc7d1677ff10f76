"""cyclecast — period, ovulation and cycle-phase prediction from logged period days.

Subpackages:
    prediction/ — Pure cycle prediction engine
    models/     — Pydantic read schemas for presentation layers
"""

__version__ = "0.1.0"
