"""Models, workers and renderers consumed by the reviews list view."""
