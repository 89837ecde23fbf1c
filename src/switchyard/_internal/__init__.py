"""Internal helpers: scoped cursors and deferred values."""
