"""Utility helpers for iReviews."""
