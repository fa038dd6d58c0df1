"""JSONL run log for vocabulary generation.

Records what the pipeline decided (format, inferred prefix, collisions,
written file) so a generated vocabulary can be traced back to its inputs.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional


class GenerationLog:
    """Appends generation events to a JSONL file.

    Each event is written as a JSON line with:
    - event: Event type (graph_loaded, key_collision, file_written, etc.)
    - timestamp: ISO 8601 timestamp
    - run_id: Run identifier
    - ... event-specific fields

    Example:
        with GenerationLog(Path("generation.jsonl"), run_id="ldp-001") as log:
            builder = VocabBuilder("ldp.ttl", log=log)
            builder.run(Path("ldp.py"))
    """

    def __init__(self, log_path: Path | str, run_id: str):
        """Open the log file and write the session start marker.

        Args:
            log_path: Path to JSONL output file (appended to)
            run_id: Run identifier for provenance
        """
        self.log_path = Path(log_path)
        self.run_id = run_id
        self.event_count = 0

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_file = open(self.log_path, "a", encoding="utf-8")

        self._write_event({"event": "session_start"})

    def _timestamp(self) -> str:
        return datetime.now(timezone.utc).isoformat()

    def _write_event(self, event: dict[str, Any]) -> None:
        """Write one event line; failures warn but never abort generation."""
        try:
            event.setdefault("timestamp", self._timestamp())
            event.setdefault("run_id", self.run_id)
            json.dump(event, self.log_file, ensure_ascii=False)
            self.log_file.write("\n")
            self.log_file.flush()
            self.event_count += 1
        except (OSError, ValueError, TypeError) as e:
            print(f"Warning: Failed to write log event: {e}")

    # === Pipeline Events ===

    def on_graph_loaded(self, source: str, rdf_format: str, triple_count: int) -> None:
        self._write_event({
            "event": "graph_loaded",
            "source": source,
            "format": rdf_format,
            "triple_count": triple_count,
        })

    def on_prefix_inferred(self, prefix: Optional[str], candidates: list[str]) -> None:
        """Log the inferred prefix and every ontology subject it was chosen from."""
        self._write_event({
            "event": "prefix_inferred",
            "prefix": prefix,
            "candidates": candidates,
        })

    def on_key_collision(self, key: str, kept_uri: str, dropped_uri: str) -> None:
        self._write_event({
            "event": "key_collision",
            "key": key,
            "kept_uri": kept_uri,
            "dropped_uri": dropped_uri,
        })

    def on_terms_extracted(self, prefix: str, term_count: int) -> None:
        self._write_event({
            "event": "terms_extracted",
            "prefix": prefix,
            "term_count": term_count,
        })

    def on_file_written(self, path: str, term_count: int) -> None:
        self._write_event({
            "event": "file_written",
            "path": path,
            "term_count": term_count,
        })

    def on_generation_failed(self, error: Exception) -> None:
        self._write_event({
            "event": "generation_failed",
            "error_type": type(error).__name__,
            "error": str(error),
        })

    def close(self) -> None:
        """Write the session end marker and close the file."""
        if self.log_file.closed:
            return
        self._write_event({"event": "session_end", "event_count": self.event_count})
        self.log_file.close()

    def __enter__(self) -> GenerationLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
