"""Core data types and enumerations."""
