"""Golden-file comparison helper for frame JSON output."""

from __future__ import annotations

import json
import os
from pathlib import Path

from core.types import Frame
from encode.frame_json import frame_to_json_bytes


def check_golden_frame(golden_path: Path, frame: Frame) -> None:
    """Assert a frame encodes to the JSON stored in a golden file.

    Both sides are re-serialized canonically before comparison, so value
    representation differences such as ``true`` against ``1`` or ``10.0``
    against ``10`` fail. Set ``CSVFRAME_UPDATE_GOLDEN=1`` to rewrite the
    golden file instead.

    Args:
        golden_path: Stored reference JSON path.
        frame: Frame under test.
    """
    actual = json.loads(frame_to_json_bytes(frame))
    if os.getenv("CSVFRAME_UPDATE_GOLDEN") == "1":
        golden_path.write_text(json.dumps(actual, indent=2) + "\n", encoding="utf-8")
        return
    expected = json.loads(golden_path.read_text(encoding="utf-8"))
    actual_text = _canonical_json(actual)
    expected_text = _canonical_json(expected)
    assert actual_text == expected_text, (
        f"frame JSON differs from {golden_path.name}:\n"
        f"expected {expected_text}\nactual   {actual_text}"
    )


def _canonical_json(payload: object) -> str:
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))
