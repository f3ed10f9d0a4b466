"""Application layer – the export action, its ports and in-memory doubles."""
