"""Core domain: metric models, ports and errors."""
