"""
Configuration package for the vendor catalog engine.
"""
