"""
prometheus exporter reporting whether nfs mount paths are exported
"""

__version__ = "0.1.0"
