"""
Qt user interface and platform adapters.
"""
