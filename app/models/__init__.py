"""
Models Package

Exports all models for easy importing.
"""

from app.models.comment import Comment

__all__ = ['Comment']
