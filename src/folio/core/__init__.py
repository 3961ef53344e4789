"""Core document model, parser, and listings."""
