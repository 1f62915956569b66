"""Expose the Qt models used by the reviews list."""

from .review_row_adapter import ReviewRowAdapter
from .reviews_list_model import LoadState, ReviewsListModel, ReviewsListState
from .roles import Roles, role_names

__all__ = [
    "LoadState",
    "ReviewRowAdapter",
    "ReviewsListModel",
    "ReviewsListState",
    "Roles",
    "role_names",
]
