"""
Utility functions module.

Time Semantics:
- Dataset timestamps carry no zone; they are read in one configured zone
- The same zone must be used for a whole run, it shifts window boundaries
- Internally every timestamp is integer milliseconds since the epoch
"""
