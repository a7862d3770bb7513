"""Command-line interface for inspecting cached Confluence content."""
