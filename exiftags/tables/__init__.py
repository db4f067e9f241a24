"""Compiled-in field tables, one module per namespace.
"""
