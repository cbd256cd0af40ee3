"""Application package: the operation builder pipeline."""
