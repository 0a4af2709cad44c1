"""Shared fixtures: fake time and scripted geocoding backends."""

from __future__ import annotations

import os
import sys
from typing import Any, Dict, List

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from osm_map.domain.errors import BackendUnavailable, UnresolvableLocation
from osm_map.domain.models import Coordinate


class FakeClock:
    """Manual clock; sleep() advances it instead of blocking."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class ScriptedBackend:
    """GeocodeBackendPort double answering from a dict.

    Values may be a Coordinate or an exception instance to raise.
    Unknown labels raise UnresolvableLocation.
    """

    name = "scripted"

    def __init__(self, answers: Dict[str, Any]) -> None:
        self.answers = answers
        self.calls: List[str] = []

    def resolve(self, label: str) -> Coordinate:
        self.calls.append(label)
        answer = self.answers.get(label)
        if answer is None:
            raise UnresolvableLocation(f"No match for {label!r}", query=label)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def backend() -> ScriptedBackend:
    return ScriptedBackend(
        {
            "Paris": Coordinate(48.85, 2.35),
            "London": Coordinate(51.5074, -0.1278),
            "New York": Coordinate(40.7128, -74.006),
            "Down": BackendUnavailable("service down", query="Down"),
        }
    )
