"""Integer arithmetic helpers with overflow checks, config-driven multipliers and string splitting."""

__version__ = "0.1.0"
__all__ = ["arith", "split"]