"""
Excessive cancelling detection.

Windowed look-ahead scan over an ordered trade dataset producing the set of
flagged companies and the set of all companies seen.
"""

from .detector import CancellationDetector
from .models import CheckResult, WindowAggregate

__all__ = ["CancellationDetector", "CheckResult", "WindowAggregate"]
