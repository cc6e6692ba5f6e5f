"""Asteroid impact effects engine: physics, geography, earthquake comparison and tsunami estimates."""
