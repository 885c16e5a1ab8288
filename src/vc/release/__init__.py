"""Release tag management."""
