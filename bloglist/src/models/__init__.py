"""
Models package initialization.
Centralizes all database models for easy import.
"""

from bloglist.src.models.blog import Blog
from bloglist.src.models.user import User

# Export all models for easy access
__all__ = ['Blog', 'User']
