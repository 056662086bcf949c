# algebraic_structures/constants.py
"""
Algebraic Structures Constants

This module defines constants used throughout the package:

INTEGRITY CHECKING
- LARGE_SET_WARNING_CARDINALITY: Set size above which a brute-force check
  logs a warning (associativity and distributivity are O(n³))

NUMERICS
- DEFAULT_DTYPE: numpy dtype used for factory-built neutral arrays
- INVERTIBILITY_TOLERANCE: |det| at or below this is treated as singular

LOGGING
- LOGGER_NAME: loguru name used to enable/disable package output
"""
import numpy as np


# =============================================================================
# INTEGRITY CHECKING
# =============================================================================

# 200³ = 8M operation calls per associativity pass
LARGE_SET_WARNING_CARDINALITY = 200


# =============================================================================
# NUMERICS
# =============================================================================

DEFAULT_DTYPE = np.float64
INVERTIBILITY_TOLERANCE = 1e-12

assert INVERTIBILITY_TOLERANCE >= 0, "Invertibility tolerance must be non-negative"


# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAME = "algebraic_structures"
