"""Core logic: config parsing, menu model and the selection loop."""
