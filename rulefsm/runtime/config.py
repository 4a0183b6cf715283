"""
Configuration Loader
====================

Loads a machine definition and a walkthrough from YAML.

    machine:
      initial: Initial
      states: [Backlog, Progress]
      rules:
        - {from: Initial, to: Backlog}
        - {from: Backlog, to: Progress, condition: equal_integers}
    walkthrough:
      - {to: Backlog}
      - {to: Progress, args: [10, 10]}

Conditions are referenced by name and resolved against a predicate mapping
supplied by the caller.
"""

import yaml
from pathlib import Path
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional

from ..machine import StateMachine
from ..rules import SimpleTransitionRule, ConditionalTransitionRule, equal_integers


# Read-only; pass your own mapping to build_machine() to add predicates
DEFAULT_PREDICATES: Mapping[str, Callable[..., bool]] = MappingProxyType({
    "equal_integers": equal_integers,
})


@dataclass
class RuleConfig:
    """One rule entry."""
    from_state: str
    to_state: str
    condition: Optional[str] = None  # Predicate name, None for unconditional


@dataclass
class MachineConfig:
    """States and rules of the machine."""
    initial: str = "Initial"
    states: List[str] = field(default_factory=lambda: ["Backlog", "Progress"])
    rules: List[RuleConfig] = field(default_factory=lambda: [
        RuleConfig("Initial", "Backlog"),
        RuleConfig("Backlog", "Progress", condition="equal_integers"),
    ])


@dataclass
class StepConfig:
    """One transition attempt of the walkthrough."""
    to: str
    args: List[Any] = field(default_factory=list)


def _default_walkthrough() -> List[StepConfig]:
    return [
        StepConfig("Canceled"),               # Unknown state
        StepConfig("Progress"),               # No Initial -> Progress rule
        StepConfig("Backlog"),                # Simple rule
        StepConfig("Progress"),               # Wrong arity
        StepConfig("Progress", [10, 15]),     # Unequal
        StepConfig("Progress", [10.0, 10]),   # Not an integer
        StepConfig("Progress", [10, 10]),     # Passes
    ]


@dataclass
class Config:
    """Complete configuration."""
    machine: MachineConfig
    walkthrough: List[StepConfig]

    @classmethod
    def default(cls) -> "Config":
        return cls(
            machine=MachineConfig(),
            walkthrough=_default_walkthrough(),
        )


def _sequence(value: Any, where: str) -> List[Any]:
    """A YAML list, or [] when absent. Scalars are rejected."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{where} must be a list, got {value!r}")
    return value


def _state_name(value: Any, where: str) -> str:
    # YAML 1.1 reads unquoted On/Off/Yes/No as bools and 1 as an int
    if not isinstance(value, str):
        raise ValueError(f"{where} must be a string (quote it in YAML), got {value!r}")
    return value


def _parse_rule(entry: Any) -> RuleConfig:
    if not isinstance(entry, dict) or "from" not in entry or "to" not in entry:
        raise ValueError(f"Rule needs 'from' and 'to', got {entry!r}")
    condition = entry.get("condition")
    if condition is not None and not isinstance(condition, str):
        raise ValueError(f"Rule condition must be a name, got {condition!r}")
    return RuleConfig(
        from_state=_state_name(entry["from"], "rule 'from'"),
        to_state=_state_name(entry["to"], "rule 'to'"),
        condition=condition,
    )


def _parse_step(entry: Any) -> StepConfig:
    if not isinstance(entry, dict) or "to" not in entry:
        raise ValueError(f"Walkthrough step needs 'to', got {entry!r}")
    return StepConfig(
        to=_state_name(entry["to"], "walkthrough 'to'"),
        args=list(_sequence(entry.get("args"), "walkthrough 'args'")),
    )


def _parse_machine(data: Any) -> MachineConfig:
    if not isinstance(data, dict):
        raise ValueError(f"machine must be a mapping, got {data!r}")
    if "initial" not in data:
        raise ValueError("machine.initial is required")
    return MachineConfig(
        initial=_state_name(data["initial"], "machine.initial"),
        states=[
            _state_name(s, "machine.states entry")
            for s in _sequence(data.get("states"), "machine.states")
        ],
        rules=[_parse_rule(r) for r in _sequence(data.get("rules"), "machine.rules")],
    )


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file or return defaults.

    Args:
        config_path: Path to YAML config file (optional)

    Returns:
        Config object; any missing top-level section falls back to defaults
    """
    if config_path is None:
        return Config.default()

    path = Path(config_path)
    if not path.exists():
        print(f"[Config] Warning: {config_path} not found, using defaults")
        return Config.default()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

    default = Config.default()
    machine_data = data.get("machine")
    walkthrough_data = data.get("walkthrough")

    return Config(
        machine=_parse_machine(machine_data) if machine_data is not None else default.machine,
        walkthrough=(
            [_parse_step(s) for s in _sequence(walkthrough_data, "walkthrough")]
            if walkthrough_data is not None else default.walkthrough
        ),
    )


def build_machine(
    config: Config,
    predicates: Optional[Mapping[str, Callable[..., bool]]] = None,
    tracer=None,
) -> StateMachine:
    """
    Build a StateMachine from configuration.

    Unknown condition names raise ValueError. Rules the machine rejects
    (unknown endpoints) are reported and skipped.
    """
    if predicates is None:
        predicates = DEFAULT_PREDICATES

    machine = StateMachine(config.machine.initial, *config.machine.states, tracer=tracer)

    for entry in config.machine.rules:
        if entry.condition is None:
            rule = SimpleTransitionRule(entry.from_state, entry.to_state)
        else:
            if entry.condition not in predicates:
                raise ValueError(f"Unknown condition: {entry.condition}")
            rule = ConditionalTransitionRule(
                entry.from_state,
                entry.to_state,
                predicates[entry.condition],
            )

        result = machine.add_rule(rule)
        if not result:
            print(f"[Config] Warning: rule {rule!r} skipped ({result.reason})")

    return machine
