"""Interactive shell for the astronaut scheduler."""
