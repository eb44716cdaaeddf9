"""Development server for yamlhtml pages."""
