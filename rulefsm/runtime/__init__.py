"""
runtime - Configuration and Demo Shell
======================================

Question this layer answers:
"How is a machine described, and how do I drive one from the outside?"

Run:
    python -m rulefsm.runtime.runner --config workflow.yaml

This layer does NOT:
- Decide transitions (that's the machine)
- Judge arguments (that's the rules)
"""

from .config import (
    load_config,
    build_machine,
    Config,
    MachineConfig,
    RuleConfig,
    StepConfig,
    DEFAULT_PREDICATES,
)
from .runner import run, run_walkthrough, RuntimeConfig, StepOutcome

__all__ = [
    "load_config",
    "build_machine",
    "Config",
    "MachineConfig",
    "RuleConfig",
    "StepConfig",
    "DEFAULT_PREDICATES",
    "run",
    "run_walkthrough",
    "RuntimeConfig",
    "StepOutcome",
]
