"""Utility modules"""
from .client_ip import get_client_ip
from .media import parse_media_type
from .timestamps import utc_now

__all__ = ["get_client_ip", "parse_media_type", "utc_now"]
