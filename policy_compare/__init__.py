"""Side-by-side insurance policy comparison backed by a structured-output LLM call."""

__version__ = "0.1.0"
