"""Dinner picker: menu catalog parsing and random dinner decisions."""
