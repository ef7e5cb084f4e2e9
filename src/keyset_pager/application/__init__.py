"""Application layer – pagination orchestration."""
