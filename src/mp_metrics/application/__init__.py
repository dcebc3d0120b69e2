"""Application – periodic job scheduling."""
