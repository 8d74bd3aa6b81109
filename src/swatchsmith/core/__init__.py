"""Core swatch generation, color adapters, config loading and token export."""
