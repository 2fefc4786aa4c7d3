"""
Validation Kernel - field matchers for user-supplied values

Pure, synchronous validation rules that report failures as structured
results instead of raising:
- Decimal number matcher (precision and scale limits)
- Stable, namespaced error codes
- Structured JSON logging
"""

__version__ = "0.1.0"
