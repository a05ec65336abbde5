"""Domain models and property decoding."""
