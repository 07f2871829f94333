"""Room registry, broadcasting and game rules."""
