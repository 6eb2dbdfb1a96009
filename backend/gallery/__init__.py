"""
UI Component Gallery backend
Flow: main.py -> config -> middleware -> routers -> services -> database | registry
"""

__version__ = "0.1.0"
