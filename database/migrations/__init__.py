"""Schema migrations"""
