"""src/urlivo/domain/__init__.py

Domain name classification for Urlivo.

This module provides the table of known TLD suffixes and the classifier that
splits a hostname into subdomain, registrable host and TLD.
"""

from .classifier import HostParts, classify_host
from .tlds import TldTable

__all__ = ["TldTable", "HostParts", "classify_host"]
