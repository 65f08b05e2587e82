"""Domain models and stage calculators."""
