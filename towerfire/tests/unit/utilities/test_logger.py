"""Tests for run logging and the headless runner.

These tests run short simulations with logging enabled and read the merged
parquet output back with pandas.
"""

import json
import os

import pandas as pd
import pytest
from towerfire.base_classes.control_base import ControlClass
from towerfire.main import run_sim
from towerfire.utilities.data_classes import IgnitionEvent, SimParams
from towerfire.utilities.logger import Logger
from towerfire.utilities.logger_schemas import StatsLogEntry
from towerfire.utilities.parquet_writer import ParquetWriter


@pytest.fixture
def log_params(tmp_path):
    return SimParams(
        width=24, height=16, num_floors=2, num_ticks=10, seed=11,
        stats_interval=2, write_logs=True, log_folder=str(tmp_path / "logs"),
        ignitions=[IgnitionEvent(tick=0, floor=0, x=10, y=3),
                   IgnitionEvent(tick=4, floor=0, x=10, y=3)]
    )


class TestParquetWriter:
    """Tests for chunked parquet output."""

    def test_writes_numbered_chunks(self, tmp_path):
        writer = ParquetWriter(str(tmp_path / "stats"), schema=StatsLogEntry)
        entry = StatsLogEntry(timestamp=1, active_fire_cells=2, total_smoke_mass=3.0,
                              average_temperature=20.0, critical=False)

        writer.write_batch([entry])
        writer.write_batch([entry, entry])
        writer.write_batch([])

        files = sorted(os.listdir(tmp_path / "stats"))
        assert files == ["part-00000.parquet", "part-00001.parquet"]

        df = pd.read_parquet(tmp_path / "stats" / "part-00001.parquet")
        assert list(df.columns) == ["timestamp", "active_fire_cells", "total_smoke_mass",
                                    "average_temperature", "critical"]


class TestRunLogging:
    """Tests for the files produced by a logged run."""

    @pytest.fixture
    def logged_run(self, log_params):
        logger = Logger(log_params.log_folder)
        fire = run_sim(log_params, logger=logger)
        return fire, logger

    def test_stats_sampled_at_interval(self, logged_run):
        fire, logger = logged_run
        df = pd.read_parquet(os.path.join(logger.run_folder, "stats_logs.parquet"))

        assert list(df["timestamp"]) == [2, 4, 6, 8, 10]
        assert (df["active_fire_cells"] >= 0).all()

    def test_floor_danger_logged(self, logged_run):
        _, logger = logged_run
        df = pd.read_parquet(os.path.join(logger.run_folder, "floor_logs.parquet"))

        assert len(df) == 10
        assert sorted(df["floor_index"].unique()) == [0, 1]
        assert df["danger_level"].between(0, 100).all()

    def test_ignitions_logged(self, logged_run):
        _, logger = logged_run
        df = pd.read_parquet(os.path.join(logger.run_folder, "ignition_logs.parquet"))

        assert list(df["timestamp"]) == [0, 4]
        assert list(df["floor"]) == [0, 0]

    def test_status_log_results(self, logged_run):
        fire, logger = logged_run
        with open(os.path.join(logger.run_folder, "status_log.json")) as f:
            status = json.load(f)

        results = status["results"]
        assert results["ticks run"] == 10
        assert results["user interrupted"] is False
        assert results["walls collapsed"] == fire.collapsed_walls
        assert any("Ignition" in msg for msg in status["messages"])

    def test_metadata(self, logged_run, log_params):
        _, logger = logged_run
        with open(os.path.join(logger.session_folder, "metadata.json")) as f:
            metadata = json.load(f)

        assert metadata["inputs"]["seed"] == 11
        assert metadata["building size"]["floors"] == 2
        assert len(metadata["ignitions"]) == 2

    def test_temporary_chunks_removed(self, logged_run):
        _, logger = logged_run

        for stream in ("stats_logs", "floor_logs", "ignition_logs"):
            assert os.listdir(os.path.join(logger.session_folder, stream)) == []

    def test_second_run_gets_own_folder(self, log_params):
        logger = Logger(log_params.log_folder)
        run_sim(log_params, logger=logger)
        first = logger.run_folder
        run_sim(log_params, logger=logger)

        assert first != logger.run_folder
        assert os.path.exists(os.path.join(logger.run_folder, "stats_logs.parquet"))


class TestPeriodicFlush:
    """Tests for cached rows reaching disk while a run is still going."""

    @pytest.fixture
    def running_sim(self, tmp_path):
        from towerfire.fire_simulator.fire import FireSim

        params = SimParams(width=24, height=16, num_floors=2, seed=11,
                           stats_interval=1, flush_interval=5)
        fire = FireSim(params)
        logger = Logger(str(tmp_path / "logs"))
        logger.start_new_run()
        fire.set_logger(logger)
        return fire, logger

    def test_chunks_written_before_finish(self, running_sim):
        fire, logger = running_sim

        for _ in range(12):
            fire.update()

        stats_dir = os.path.join(logger.session_folder, "stats_logs")
        assert sorted(os.listdir(stats_dir)) == ["part-00000.parquet", "part-00001.parquet"]

        df = pd.read_parquet(os.path.join(stats_dir, "part-00001.parquet"))
        assert list(df["timestamp"]) == [6, 7, 8, 9, 10]

        with open(os.path.join(logger.run_folder, "status_log.json")) as f:
            assert json.load(f)["latest_flush"] is not None

    def test_finish_keeps_flushed_rows(self, running_sim):
        fire, logger = running_sim

        for _ in range(12):
            fire.update()
        logger.finish(fire)

        df = pd.read_parquet(os.path.join(logger.run_folder, "stats_logs.parquet"))
        assert list(df["timestamp"]) == list(range(1, 13))


class TestRunSim:
    """Tests for the headless runner without logging."""

    def test_runs_requested_ticks(self):
        fire = run_sim(SimParams(width=12, height=10, num_floors=2, num_ticks=4, seed=3))
        assert fire.tick == 4

    def test_controls_run_between_ticks(self):
        class Recorder(ControlClass):
            def __init__(self):
                self.ticks = []

            def process_state(self, fire):
                self.ticks.append(fire.tick)

        recorder = Recorder()
        run_sim(SimParams(width=12, height=10, num_floors=1, num_ticks=3, seed=3),
                controls=[recorder])

        assert recorder.ticks == [0, 1, 2, 3]

    def test_configured_ignition_applied_first(self):
        class Checker(ControlClass):
            def __init__(self):
                self.fire_at_start = None

            def process_state(self, fire):
                if self.fire_at_start is None:
                    self.fire_at_start = fire.floors[0][3][10].fire

        checker = Checker()
        params = SimParams(width=24, height=16, num_floors=1, num_ticks=0, seed=3,
                           ignitions=[IgnitionEvent(tick=0, floor=0, x=10, y=3)])
        run_sim(params, controls=[checker])

        assert checker.fire_at_start == 1.0
