"""Application layer – generators composed from kernel building blocks."""
