"""algograph-lite: small in-memory graph algorithms."""
