import os
from dataclasses import fields
from typing import List

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq


class ParquetWriter:
    """Writes batches of log entry dataclasses as numbered parquet chunks.

    Columns follow the field order of ``schema`` so every chunk in a folder
    can be concatenated without reordering.
    """
    def __init__(self, folder: str, schema):
        self.folder = folder
        self.schema = schema
        self.columns = [f.name for f in fields(schema)]
        os.makedirs(folder, exist_ok=True)
        self.counter = 0

    def write_batch(self, entries: List):
        if not entries:
            return
        os.makedirs(self.folder, exist_ok=True)

        df = pd.DataFrame([entry.to_dict() for entry in entries], columns=self.columns)
        file_path = os.path.join(self.folder, f"part-{self.counter:05d}.parquet")
        self.counter += 1

        table = pa.Table.from_pandas(df, preserve_index=False)
        pq.write_table(table, file_path, compression='brotli')
