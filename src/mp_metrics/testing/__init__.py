"""Testing – in-memory doubles for use in unit tests."""
