"""Application layer: the estimate pipeline and snapshot versioning."""
