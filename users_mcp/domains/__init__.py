"""
Domain Endpoints

Each domain module contains the tools and resources for one kind of record.

To add a new domain:
1. Create domains/newdomain.py with NEWDOMAIN_TOOLS / NEWDOMAIN_RESOURCES lists
2. Import in endpoints.py and add to DEFAULT_TOOLS / DEFAULT_RESOURCES
"""

from .users import USER_RESOURCES, USER_TOOLS

__all__ = [
    "USER_RESOURCES",
    "USER_TOOLS",
]
