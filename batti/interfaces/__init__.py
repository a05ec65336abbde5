"""Abstract interfaces for the collaborators around the core."""
