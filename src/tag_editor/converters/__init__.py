"""
Document loading and serialization.
"""

from .xml_bridge import XMLBridge

__all__ = ["XMLBridge"]
