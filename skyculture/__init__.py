"""
Sky culture catalog.

Loads star names, constellation stick figures and constellation
boundaries from sky-culture text resources into a read-only catalog.
"""

__version__ = "1.0.0"
