"""Application layer: one command/query handler per use case."""
