# notionloom/resources/__init__.py
"""Exposes the resource client classes."""

from .base_client import BaseResourceClient
from .blocks_client import BlockChildrenClient, BlocksClient
from .databases_client import DatabasesClient
from .pages_client import PagesClient
from .users_client import UsersClient

__all__ = [
    "BaseResourceClient",
    "BlockChildrenClient",
    "BlocksClient",
    "DatabasesClient",
    "PagesClient",
    "UsersClient",
]
