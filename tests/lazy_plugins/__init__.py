"""
Plugins nobody imports directly; only class catalog expansion loads them.
"""
