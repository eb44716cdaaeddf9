"""Internal utilities for yamlhtml."""
