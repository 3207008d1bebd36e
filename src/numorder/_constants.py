"""Shared constants for numorder."""

# Comparator context names
CONTEXT_ABSOLUTE_NAME: str = "AbsoluteValue"

# Signed 64-bit range for integral operands
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# Largest integer a float represents exactly; mixed comparisons above this
# magnitude may lose precision
FLOAT_EXACT_INT_LIMIT: int = 2**53

# Operand positions reported by InvalidArgumentError
POSITION_FIRST: str = "first"
POSITION_SECOND: str = "second"
POSITION_BOTH: str = "both"

# Config file discovery
CONFIG_FILENAMES: tuple[str, ...] = ("numorder.yaml", "numorder.yml")

# Text tokens the CLI reads as an absent value
NULL_TOKENS: frozenset[str] = frozenset({"null", "none", "-"})
