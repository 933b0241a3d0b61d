"""Database package for the video asset API"""
from .connection import DatabaseConnection, init_db

__all__ = ["DatabaseConnection", "init_db"]
