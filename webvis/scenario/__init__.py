"""Scenario file parsing: text → Scenario, and back."""

from webvis.scenario.errors import (
    EmptyModuleBlock,
    MalformedField,
    MalformedHeader,
    ScenarioError,
    ScenarioSourceError,
    UnresolvedVisgroupReference,
)
from webvis.scenario.parser import parse_scenario
from webvis.scenario.serializer import serialize_scenario

__all__ = [
    "EmptyModuleBlock",
    "MalformedField",
    "MalformedHeader",
    "ScenarioError",
    "ScenarioSourceError",
    "UnresolvedVisgroupReference",
    "parse_scenario",
    "serialize_scenario",
]
