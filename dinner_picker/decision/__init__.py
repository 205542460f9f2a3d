"""
Decision engine.

Responsibilities:
- Describe user intent as one of four filters (genre, dessert, carb, random).
- Narrow a parsed catalog to the candidates matching a filter.
- Draw one candidate uniformly at random, with an injectable random source.
- Report the pick together with the candidate count.
"""
