"""Sample records loaded into the store at startup."""
