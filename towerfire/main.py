"""Headless entry point for running a building fire simulation from a config file.

Usage:
    python -m towerfire.main --config path/to/run.cfg
    python -m towerfire.main --config path/to/run.cfg --ticks 200

Config format::

    [Simulation]
    width = 60
    height = 40
    num_floors = 3
    num_ticks = 500
    seed = 42
    vertical_conductivity = 0.08
    wind_speed = 0
    wind_direction = 0
    stats_interval = 5
    flush_interval = 50
    write_logs = true
    log_folder = ./logs

    [Ignitions]
    start = 0, 0, 10, 7
"""

from typing import List, Optional
import argparse
import configparser
import os

from tqdm import tqdm

from towerfire.base_classes.control_base import ControlClass
from towerfire.exceptions import ConfigurationError, ValidationError
from towerfire.fire_simulator.fire import FireSim
from towerfire.utilities.data_classes import IgnitionEvent, SimParams, WindParams
from towerfire.utilities.fire_util import LayoutConstants, PhysicsConstants
from towerfire.utilities.ignition_schedule import IgnitionSchedule
from towerfire.utilities.logger import Logger


def _parse_ignition(name: str, value: str, cfg_path: str) -> IgnitionEvent:
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 4:
        raise ConfigurationError("Ignition must be 'tick, floor, x, y'",
                                 config_path=cfg_path, parameter=name)

    try:
        tick, floor, x, y = (int(p) for p in parts)
        return IgnitionEvent(tick=tick, floor=floor, x=x, y=y)

    except (ValueError, ValidationError) as e:
        raise ConfigurationError(f"Invalid ignition entry: {e}",
                                 config_path=cfg_path, parameter=name) from e


def load_sim_params(cfg_path: str) -> SimParams:
    """Read a ``.cfg`` file into :class:`SimParams`.

    Missing keys fall back to the :class:`SimParams` defaults.

    Raises:
        ConfigurationError: if the file is missing or a value is invalid.
    """
    if not os.path.exists(cfg_path):
        raise ConfigurationError("Configuration file not found", config_path=cfg_path)

    config = configparser.ConfigParser(inline_comment_prefixes=(";", "#"))
    config.read(cfg_path)

    if "Simulation" not in config:
        raise ConfigurationError("Missing [Simulation] section", config_path=cfg_path)

    sim = config["Simulation"]

    try:
        width = sim.getint("width", LayoutConstants.GRID_WIDTH)
        height = sim.getint("height", LayoutConstants.GRID_HEIGHT)
        num_floors = sim.getint("num_floors", LayoutConstants.NUM_FLOORS)
        num_ticks = sim.getint("num_ticks", 500)
        seed = sim.getint("seed", None)
        vertical_conductivity = sim.getfloat("vertical_conductivity",
                                             PhysicsConstants.DEFAULT_VERTICAL_CONDUCTIVITY)
        wind_speed = sim.getfloat("wind_speed", 0.0)
        wind_direction = sim.getfloat("wind_direction", 0.0)
        stats_interval = sim.getint("stats_interval", 5)
        flush_interval = sim.getint("flush_interval", 50)
        write_logs = sim.getboolean("write_logs", False)

    except ValueError as e:
        raise ConfigurationError(f"Invalid value: {e}", config_path=cfg_path) from e

    log_folder = sim.get("log_folder", None)

    if num_ticks < 0:
        raise ConfigurationError("Tick count must be non-negative",
                                 config_path=cfg_path, parameter="num_ticks")

    if stats_interval < 1:
        raise ConfigurationError("Stats interval must be at least 1",
                                 config_path=cfg_path, parameter="stats_interval")

    if flush_interval < 1:
        raise ConfigurationError("Flush interval must be at least 1",
                                 config_path=cfg_path, parameter="flush_interval")

    if write_logs and not log_folder:
        raise ConfigurationError("A log folder is required when write_logs is enabled",
                                 config_path=cfg_path, parameter="log_folder")

    ignitions = []
    if "Ignitions" in config:
        for name, value in config["Ignitions"].items():
            ignitions.append(_parse_ignition(name, value, cfg_path))

    sim_params = SimParams(
        width=width,
        height=height,
        num_floors=num_floors,
        num_ticks=num_ticks,
        seed=seed,
        vertical_conductivity=vertical_conductivity,
        wind=WindParams(speed=wind_speed, direction_deg=wind_direction),
        stats_interval=stats_interval,
        flush_interval=flush_interval,
        write_logs=write_logs,
        log_folder=log_folder,
        ignitions=ignitions
    )

    return sim_params


def run_sim(sim_params: SimParams, controls: Optional[List[ControlClass]] = None,
            logger: Optional[Logger] = None) -> FireSim:
    """Build a simulation and run it for ``sim_params.num_ticks`` ticks.

    Configured ignitions are applied through an :class:`IgnitionSchedule`
    ahead of any user controls. Controls run after every tick, and once
    before the first so tick-0 ignitions take effect immediately.

    Args:
        sim_params (SimParams): simulation inputs
        controls (List[ControlClass], optional): extra between-tick collaborators
        logger (Logger, optional): logger to use, created from
            ``sim_params.log_folder`` when ``write_logs`` is set and none is given

    Returns:
        FireSim: the simulation after its final tick
    """
    fire = FireSim(sim_params)

    if logger is None and sim_params.write_logs:
        logger = Logger(sim_params.log_folder)

    if logger:
        logger.start_new_run()
        logger.log_metadata(sim_params)
        fire.set_logger(logger)

    all_controls = [IgnitionSchedule(sim_params.ignitions)] + list(controls or [])

    def _process_controls():
        for control in all_controls:
            control.process_state(fire)

    try:
        _process_controls()

        for _ in tqdm(range(sim_params.num_ticks), desc="Simulating", unit="tick"):
            fire.update()
            _process_controls()

    except KeyboardInterrupt:
        print("Simulation interrupted, writing logs...")
        if logger:
            logger.finish(fire, on_interrupt=True)
        raise

    if logger:
        logger.finish(fire)

    return fire


def print_summary(fire: FireSim):
    """Print final statistics of a finished run."""
    stats = fire.get_stats()

    print("\n" + "=" * 50)
    print("SIMULATION SUMMARY")
    print("=" * 50)
    print(f"Ticks run:           {fire.tick}")
    print(f"Active fire cells:   {stats.active_fire_cells}")
    print(f"Total smoke mass:    {stats.total_smoke_mass:.1f}")
    print(f"Average temperature: {stats.average_temperature:.1f}")
    print(f"Walls collapsed:     {fire.collapsed_walls}")
    print(f"Cells burned out:    {fire.burned_out_cells}")
    print("-" * 50)
    for floor in stats.floor_stats:
        print(f"Floor {floor.floor_index} danger:      {floor.danger_level:.1f}")
    print(f"Status:              {'CRITICAL' if stats.is_critical else 'STABLE'}")
    print("=" * 50)


def main():
    parser = argparse.ArgumentParser(description="Run a multi-floor building fire simulation")
    parser.add_argument("--config", "-c", type=str, help="Path to .cfg file")
    parser.add_argument("--ticks", "-n", type=int, default=None,
                        help="Override the number of ticks to simulate")

    args = parser.parse_args()

    if not args.config:
        raise ValueError("No configuration file provided. Use --config to specify a .cfg file.")

    print(f"Loading simulation params from {args.config}...")
    sim_params = load_sim_params(args.config)

    if args.ticks is not None:
        sim_params.num_ticks = args.ticks

    fire = run_sim(sim_params)
    print_summary(fire)


if __name__ == "__main__":
    main()
