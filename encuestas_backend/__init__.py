"""Survey management backend."""
