import os
from towerfire.utilities.logger_schemas import StatsLogEntry, FloorLogEntry, IgnitionLogEntry
from towerfire.utilities.parquet_writer import ParquetWriter
from towerfire.utilities.data_classes import SimParams, SimulationStats
import pyarrow as pa
import pyarrow.parquet as pq
import pandas as pd
import datetime
import dataclasses
import glob
import json
import shutil
import sys

class Logger:
    """Run logger writing aggregate stats to parquet and messages to a JSON status log.

    Layout on disk::

        <log_folder>/log_<datetime>/
            metadata.json
            run_<n>/
                stats_logs.parquet
                floor_logs.parquet
                ignition_logs.parquet
                status_log.json

    No per-cell simulation state is written.
    """
    def __init__(self, log_folder: str):

        self.log_ctr = 0
        self._run_folder = None

        self.log_folder = log_folder
        os.makedirs(self.log_folder, exist_ok=True)

        self._session_folder = self.generate_session_folder()
        os.makedirs(self._session_folder, exist_ok=True)

        self._init_writers()

        self._status_log = {
            "sim_start": datetime.datetime.now().isoformat(),
            "messages": [],
            "latest_flush": None,
            "results": None
        }

    def _init_writers(self):
        self.stats_writer = ParquetWriter(
            os.path.join(self._session_folder, "stats_logs"), schema=StatsLogEntry
        )

        self.floor_writer = ParquetWriter(
            os.path.join(self._session_folder, "floor_logs"), schema=FloorLogEntry
        )

        self.ignition_writer = ParquetWriter(
            os.path.join(self._session_folder, "ignition_logs"), schema=IgnitionLogEntry
        )

        self._stats_cache = []
        self._floor_cache = []
        self._ignition_cache = []

    def cache_stats(self, tick: int, stats: SimulationStats):
        self._stats_cache.append(StatsLogEntry(
            timestamp=tick,
            active_fire_cells=stats.active_fire_cells,
            total_smoke_mass=stats.total_smoke_mass,
            average_temperature=stats.average_temperature,
            critical=stats.is_critical
        ))

        self._floor_cache.extend(
            FloorLogEntry(timestamp=tick, floor_index=f.floor_index, danger_level=f.danger_level)
            for f in stats.floor_stats
        )

    def cache_ignition(self, entry: IgnitionLogEntry):
        self._ignition_cache.append(entry)

    def flush(self):
        self.stats_writer.write_batch(self._stats_cache)
        self._stats_cache.clear()

        self.floor_writer.write_batch(self._floor_cache)
        self._floor_cache.clear()

        self.ignition_writer.write_batch(self._ignition_cache)
        self._ignition_cache.clear()

        self._status_log["latest_flush"] = datetime.datetime.now().isoformat()
        self._write_status_log()

    def write_results(self, fire, on_interrupt: bool = False):
        if fire is not None:
            stats = fire.get_stats()

            self._status_log["results"] = {
                "user interrupted": on_interrupt,
                "ticks run": fire.tick,
                "active fire cells": stats.active_fire_cells,
                "total smoke mass": stats.total_smoke_mass,
                "average temperature": stats.average_temperature,
                "walls collapsed": fire.collapsed_walls,
                "cells burned out": fire.burned_out_cells,
                "fire extinguished": stats.active_fire_cells == 0
            }

    def finish(self, fire, on_interrupt: bool = False):
        self.write_results(fire, on_interrupt)
        self.flush()

        streams = ("stats_logs", "floor_logs", "ignition_logs")
        for stream in streams:
            folder = os.path.join(self._session_folder, stream)
            self._merge_parquet_files(folder, os.path.join(self._run_folder, f"{stream}.parquet"))

            # Delete the temporary folders after merging
            if os.path.exists(folder):
                shutil.rmtree(folder)

        # Writers for the next run start from empty folders
        self._init_writers()

        if on_interrupt:
            sys.exit(0)

    def _merge_parquet_files(self, folder_path: str, output_file: str):

        parquet_files = sorted(glob.glob(os.path.join(folder_path, "part-*.parquet")))

        if not parquet_files:
            print(f"No parquet files found in {folder_path}")
            return

        dfs = [pd.read_parquet(f) for f in parquet_files]
        combined_df = pd.concat(dfs, ignore_index=True)

        table = pa.Table.from_pandas(combined_df, preserve_index=False)
        pq.write_table(table, output_file, compression='snappy')

    def generate_session_folder(self) -> str:
        """Generates the path for the current sim's log files based on current datetime

        :return: Session folder path string
        :rtype: str
        """
        date_time_str = datetime.datetime.now().strftime('%d-%b-%Y-%H-%M-%S')
        return os.path.join(self.log_folder, f"log_{date_time_str}")

    def start_new_run(self):
        self._open_run_folder()
        self._status_log["messages"] = []
        self._status_log["results"] = None

    def _open_run_folder(self):
        self._run_folder = os.path.join(self._session_folder, f"run_{self.log_ctr}")
        os.makedirs(self._run_folder, exist_ok=True)

        self.log_ctr += 1

    def log_metadata(self, sim_params: SimParams):
        metadata = {
            "inputs": {
                "seed": sim_params.seed,
                "ticks": sim_params.num_ticks,
                "vertical conductivity": sim_params.vertical_conductivity,
                "stats interval": sim_params.stats_interval,
                "flush interval": sim_params.flush_interval,
                "wind speed": sim_params.wind.speed,
                "wind direction (deg)": sim_params.wind.direction_deg
            },

            "building size": {
                "width": sim_params.width,
                "height": sim_params.height,
                "floors": sim_params.num_floors,
                "total cells": sim_params.width * sim_params.height * sim_params.num_floors
            },

            "ignitions": [dataclasses.asdict(ign) for ign in sim_params.ignitions]
        }

        metadata_path = os.path.join(self._session_folder, "metadata.json")
        with open(metadata_path, 'w') as f:
            json.dump(metadata, f, indent=2)

    def log_message(self, message: str):
        timestamp = datetime.datetime.now().isoformat()
        entry = f"[{timestamp}]: {message}"
        self._status_log["messages"].append(entry)

    def _write_status_log(self):
        if self._run_folder is None:
            self._open_run_folder()

        status_path = os.path.join(self._run_folder, "status_log.json")
        with open(status_path, 'w') as f:
            json.dump(self._status_log, f, indent = 2)

    @property
    def session_folder(self) -> str:
        return self._session_folder

    @property
    def run_folder(self) -> str:
        return self._run_folder
