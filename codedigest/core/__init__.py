"""
Core components for codedigest.
"""
