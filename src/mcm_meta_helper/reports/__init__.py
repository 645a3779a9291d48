"""Human-readable rendering of check, update and validate results."""
