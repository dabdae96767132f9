"""Schema2Script HTTP backend."""
