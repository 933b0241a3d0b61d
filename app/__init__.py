"""Application package"""
