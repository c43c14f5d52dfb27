"""Tests for the fatigue-index custom stream payload."""

from sprintlab.engine.custom_streams import (
    broadcast_fatigue_index_stream,
    fatigue_index_stream,
)


class TestFatigueIndexStream:
    def test_payload(self):
        stream = fatigue_index_stream([0.95, 0.96])
        assert stream.name == "Neural Fatigue Index"
        assert stream.short_name == "NFI"
        assert stream.units == "index"
        assert stream.color == "#FF4500"
        assert stream.data == [0.95, 0.96]


class TestBroadcast:
    def test_one_value_per_sample(self):
        stream = broadcast_fatigue_index_stream([0.0, 5.0, 9.0, 0.0], 0.97)
        assert stream.data == [0.97, 0.97, 0.97, 0.97]

    def test_missing_velocity(self):
        assert broadcast_fatigue_index_stream(None, 0.97).data == []
        assert broadcast_fatigue_index_stream([], 0.97).data == []
