"""Configuration, errors and the two-pass destriping pipeline."""
