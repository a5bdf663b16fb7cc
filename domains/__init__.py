"""Domain modules for the Achievement News bot."""
