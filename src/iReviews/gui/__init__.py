"""Qt-facing layer of the reviews engine."""
