"""
                Restaurant Ordering API

In-memory dishes and orders served over a JSON API, with every
write gated by an ordered validation pipeline.

Author: Khalil_Bannouri
Version: 3.0.0
License: MIT
"""

__version__ = "3.0.0"
__author__ = "Khalil_Bannouri"
