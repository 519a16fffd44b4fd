"""Core data contracts for valley searches."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Heading(str, Enum):
    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"


class SearchOutcome(str, Enum):
    FOUND = "found"
    EXHAUSTED = "exhausted"
    UNREACHABLE = "unreachable"


class SearchResult(BaseModel):
    """Outcome of one time-expanded search from `start` to `goal`.

    `unreachable` only proves the goal cannot be reached when `pruned` is
    false; once pruning has discarded states the search is an approximation.
    """

    model_config = ConfigDict(extra="forbid")

    outcome: SearchOutcome
    start: tuple[int, int]
    goal: tuple[int, int]
    start_minute: int = 0
    minute: int | None = None
    elapsed: int | None = None
    bound: int
    visited_states: int = 0
    frontier_sizes: list[int] = Field(default_factory=list)
    pruned: bool = False
    path: list[tuple[int, int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_arrival(self) -> "SearchResult":
        if self.outcome == SearchOutcome.FOUND:
            if self.minute is None or self.elapsed is None:
                raise ValueError("FOUND requires minute and elapsed")
            if self.minute - self.start_minute != self.elapsed:
                raise ValueError("elapsed must equal minute - start_minute")
        elif self.minute is not None or self.elapsed is not None:
            raise ValueError("failed searches cannot carry an arrival time")
        return self

    @property
    def succeeded(self) -> bool:
        return self.outcome == SearchOutcome.FOUND


class TripResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    legs: list[SearchResult]
    total_minutes: int | None = None

    @property
    def outcome(self) -> SearchOutcome:
        for leg in self.legs:
            if not leg.succeeded:
                return leg.outcome
        return SearchOutcome.FOUND

    @property
    def succeeded(self) -> bool:
        return self.outcome == SearchOutcome.FOUND
