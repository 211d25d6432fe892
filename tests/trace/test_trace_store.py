import json
import tempfile
import unittest
from pathlib import Path

from recordkit.trace import NullTraceStore, Replay, TraceEmitter, TraceStoreJSONL


class TestTrace(unittest.TestCase):
    def test_emit_and_replay(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "nested" / "trace.jsonl"
            trace = TraceEmitter(store=TraceStoreJSONL(path), run_id="r1")
            trace.emit("record_frozen", data={"fields": ["a"]})
            trace.emit("update_rejected", field="a", message="a property is read-only.")

            lines = [l for l in path.read_text(encoding="utf-8").splitlines() if l.strip()]
            self.assertEqual(len(lines), 2)
            first = json.loads(lines[0])
            self.assertEqual(first["run_id"], "r1")
            self.assertTrue(first["ts"].endswith("Z"))
            self.assertNotIn("field", first)

            events = list(Replay(path).iter_events())
            self.assertEqual([e["event_type"] for e in events], ["record_frozen", "update_rejected"])
            self.assertEqual(events[1]["field"], "a")

    def test_select_filters_and_tail(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "trace.jsonl"
            trace = TraceEmitter(store=TraceStoreJSONL(path), run_id="r1")
            trace.emit("update_rejected", field="firstName")
            trace.emit("update_applied", data={"fields": ["address"]})
            trace.emit("update_rejected", field="age")
            trace.emit("run_finished")

            replay = Replay(path)
            self.assertEqual(len(replay.select()), 4)
            self.assertEqual([e["field"] for e in replay.select(event_type="update_rejected")], ["firstName", "age"])
            self.assertEqual([e["event_type"] for e in replay.select(field="age")], ["update_rejected"])
            self.assertEqual([e["event_type"] for e in replay.select(tail=1)], ["run_finished"])
            self.assertEqual(replay.select(tail=0), [])
            self.assertEqual(replay.rejected_fields(), ["firstName", "age"])

    def test_replay_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(list(Replay(Path(td) / "missing.jsonl").iter_events()), [])

    def test_null_store_drops_events(self) -> None:
        store = NullTraceStore()
        TraceEmitter(store=store, run_id="r1").emit("run_started")
        self.assertIsNone(store.path)


if __name__ == "__main__":
    unittest.main()
