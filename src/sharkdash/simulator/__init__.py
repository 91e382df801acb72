"""Desktop simulator for Shark Dash."""
