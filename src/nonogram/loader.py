import json
import os
from typing import Any, Dict, List

import pandas as pd

from src.utils.logging_utils import get_logger

logger = get_logger("loader")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .parquet, .csv, .json and .jsonl formats.
    Returns a list of raw puzzle dictionaries (see `parser.parse_puzzle`).
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    stem = os.path.splitext(os.path.basename(file_path))[0]

    def _is_missing(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, float):
            return bool(pd.isna(value))
        return False

    def _normalize_record(record: Dict[str, Any], index: int) -> Dict[str, Any]:
        record = {k: v for k, v in record.items() if not _is_missing(v)}
        if not record.get("id"):
            record["id"] = stem if index == 0 else f"{stem}-{index}"
        else:
            record["id"] = str(record["id"])
        return record

    def _from_records(records: List[Any]) -> List[Dict[str, Any]]:
        dicts = [r for r in records if isinstance(r, dict)]
        return [_normalize_record(r, i) for i, r in enumerate(dicts)]

    def _read_jsonl() -> List[Dict[str, Any]]:
        data = []
        with open(file_path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    data.append(json.loads(line))
                except json.JSONDecodeError:
                    logger.warning("%s:%d: skipping invalid JSON line", file_path, line_number)
        return _from_records(data)

    # Case 1: Parquet / CSV (tabular, one puzzle per row)
    if file_path.endswith((".parquet", ".csv")):
        try:
            if file_path.endswith(".parquet"):
                df = pd.read_parquet(file_path)
            else:
                df = pd.read_csv(file_path)
        except Exception as e:
            logger.error("Error reading %s: %s", file_path, e)
            return []
        return _from_records(df.to_dict(orient="records"))

    # Case 2: JSON File (array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL.
            return _read_jsonl()
        if isinstance(payload, list):
            return _from_records(payload)
        if isinstance(payload, dict):
            if isinstance(payload.get("puzzles"), list):
                return _from_records(payload["puzzles"])
            return _from_records([payload])
        return []

    # Case 3: JSONL File
    return _read_jsonl()
