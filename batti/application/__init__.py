"""Application services: state store, change handling, child processes."""
