"""Qt views for admin dashboard tables."""
