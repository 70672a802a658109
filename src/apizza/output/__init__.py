"""Human-facing output helpers."""
