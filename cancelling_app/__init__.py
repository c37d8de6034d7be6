"""
Cancelling App - Excessive Trade Cancelling Checker

Scans a time-ordered batch of trade events and reports which companies
cancel an excessive share of their orders within a one minute window,
along with how many companies behave well.
"""

from .checker import ExcessiveCancellingChecker

__version__ = "0.1.0"
__author__ = "Cancelling App Team"

__all__ = ["ExcessiveCancellingChecker"]
