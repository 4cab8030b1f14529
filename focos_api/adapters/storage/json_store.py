"""JSON file-based focus dataset: implements FocusStorePort."""

import json
from pathlib import Path
from typing import List, Optional

from focos_api.domain.models import FocusRecord, FocusStoreError


class JsonFocusStore:
    """Loads daily focus records from a JSON list, once per process."""

    def __init__(self, data_file: str = "data/focos.json"):
        self._path = Path(data_file)
        self._records: Optional[List[FocusRecord]] = None

    def records(self) -> List[FocusRecord]:
        if self._records is None:
            self._records = self._load()
        return self._records

    def _load(self) -> List[FocusRecord]:
        if not self._path.exists():
            return []
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise FocusStoreError(f"cannot read {self._path}: {e}") from e
        if not isinstance(raw, list):
            raise FocusStoreError(f"{self._path}: expected a JSON list")
        try:
            return [FocusRecord.from_dict(item) for item in raw]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise FocusStoreError(f"{self._path}: malformed record: {e}") from e
