"""User interfaces built on top of the thaifont core."""
