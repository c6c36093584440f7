"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest


class FakeClock:
    """Clock returning a settable moment"""
    
    def __init__(self, now: datetime):
        self.now = now
    
    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """Clock frozen at mid October 2026 (UTC)"""
    return FakeClock(datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc))


class ScriptedInput:
    """Replays answers to input() and raises EOFError once they run out"""
    
    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts = []
    
    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def output_lines() -> list:
    """Collects lines written by the console layer"""
    return []
