"""
Interfaces for argmatch.

Interfaces have names {}_i, and need to be inherited from.
"""

from .matcher import ArgMatcher_i
