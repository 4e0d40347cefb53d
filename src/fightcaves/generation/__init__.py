"""Generation — wave composition, location rotation, and route building.

Pure and deterministic: the 15 routes depend on nothing but constants,
so they are built once and cached for the life of the process.
"""
