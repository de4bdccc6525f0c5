"""Small helpers shared by the normalizer and encoder."""
