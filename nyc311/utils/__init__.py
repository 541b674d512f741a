"""
Utility modules for the NYC 311 client
"""
from .config_loader import ServiceRequestSettings, load_settings

__all__ = [
    'ServiceRequestSettings',
    'load_settings',
]
