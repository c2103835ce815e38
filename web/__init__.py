"""Flask web surface for In a Nutshell."""
