"""Order the steps of a recipe kept in a plain dict.

Run with: python examples/recipe.py
"""

from topocontainers import TopologicalDict, format_sequence

# Step name -> minutes
steps = TopologicalDict(
    {
        "serve": 1,
        "boil water": 10,
        "chop onions": 5,
        "cook pasta": 9,
        "fry onions": 7,
        "make sauce": 12,
        "set table": 3,
    },
)

steps.precede("boil water", "cook pasta")
steps.precede("chop onions", "fry onions")
steps.precede("fry onions", "make sauce")
steps.precede("cook pasta", "serve")
steps.precede("make sauce", "serve")

if __name__ == "__main__":
    print(format_sequence(steps.sort()))  # noqa: T201
