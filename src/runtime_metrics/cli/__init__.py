"""Command-line interface for inspecting the runtime metrics catalog."""
