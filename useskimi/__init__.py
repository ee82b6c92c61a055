"""
usEskimi – OpenRTB bidder adapter for the usEskimi exchange.
"""

__version__ = "0.1.0"
