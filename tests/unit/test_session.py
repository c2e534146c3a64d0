from __future__ import annotations

import json

import pytest

from scene_partner.realtime import is_session_ready, build_session_update
from tests.unit.fakes import make_settings


def test_build_session_update_matches_realtime_schema() -> None:
    msg = build_session_update(make_settings().session)

    assert msg["type"] == "session.update"
    session = msg["session"]
    assert session["modalities"] == ["text", "audio"]
    assert session["instructions"].startswith("You are an acting scene partner.")
    assert session["voice"] == "alloy"
    assert session["input_audio_format"] == "pcm16"
    assert session["output_audio_format"] == "pcm16"
    assert session["input_audio_transcription"] == {"model": "whisper-1"}
    assert session["turn_detection"] == {
        "type": "server_vad",
        "threshold": 0.5,
        "prefix_padding_ms": 300,
        "silence_duration_ms": 800,
    }
    assert session["temperature"] == 0.8
    assert session["max_response_output_tokens"] == "inf"


def test_build_session_update_is_json_serializable() -> None:
    msg = build_session_update(make_settings().session)
    assert json.loads(json.dumps(msg)) == msg


@pytest.mark.parametrize(
    ("frame", "expected"),
    [
        (json.dumps({"type": "session.created", "session": {}}), True),
        (json.dumps({"type": "session.updated"}), False),
        (json.dumps({"event": "session.created"}), False),
        (json.dumps(["session.created"]), False),
        ("session.created", False),
        ("{broken", False),
        (json.dumps({"type": "session.created"}).encode("utf-8"), False),
    ],
)
def test_is_session_ready(frame: str | bytes, expected: bool) -> None:
    assert is_session_ready(frame) is expected
