"""Shared utilities for the towerfire simulation framework.

This package provides common utilities used across the simulation, including
constants, data structures, layout generation, statistics and logging.

Modules:
    - fire_util: Cell types, physics and layout constants, grid helpers.
    - data_classes: Dataclasses for simulation parameters and statistics.
    - layout_generator: Procedural building floor generation.
    - stats: Aggregate statistics over the building state.
    - ignition_schedule: Between-tick scheduled ignitions.
    - logger: Simulation logging with Parquet output.
    - logger_schemas: Data schemas for logged entries.
    - parquet_writer: Parquet file writing utilities.
"""
