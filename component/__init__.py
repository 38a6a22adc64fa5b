"""StrataSize calculator components."""
