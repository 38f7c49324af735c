"""Shared test fixtures for funsvg tests."""

import json

import pytest

from funsvg.models import Funscript, Keyframe, Segment


@pytest.fixture()
def make_segment():
    """Factory: make_segment(start_at, end_at, speed, start_pos=0, end_pos=100)."""
    def _make(start_at, end_at, speed, start_pos=0, end_pos=100):
        return Segment(
            start=Keyframe(at=start_at, pos=start_pos),
            end=Keyframe(at=end_at, pos=end_pos),
            speed=speed,
        )
    return _make


@pytest.fixture()
def script():
    """A short script: a slow rise, a fast stroke, a pause, a medium fall."""
    return Funscript(actions=[
        Keyframe(at=0, pos=0),
        Keyframe(at=3000, pos=60),
        Keyframe(at=3300, pos=10),
        Keyframe(at=3600, pos=90),
        Keyframe(at=6000, pos=90),
        Keyframe(at=7000, pos=20),
        Keyframe(at=9500, pos=50),
    ])


@pytest.fixture()
def script_file(tmp_path, script):
    path = tmp_path / "sample.funscript"
    path.write_text(json.dumps({
        "version": "1.0",
        "inverted": False,
        "range": 100,
        "actions": [{"at": int(a.at), "pos": int(a.pos)} for a in script.actions],
    }))
    return path
