"""Intranet portal query service.

Filters, scores, sorts and paginates intranet content, users, tags and
departments over a resident, read-only entity store.
"""

__version__ = "1.0.0"
