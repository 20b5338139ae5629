"""Building fire simulation engine.

This package provides the core simulation components for modeling fire, heat,
smoke and wall failure across the stacked floor grids of a building.

Classes:
    - FireSim: Main building fire simulation with the per-tick transition rule.
    - Cell: Square cell representing a discrete simulation unit.

.. autoclass:: FireSim
    :members:

.. autoclass:: Cell
    :members:
"""
