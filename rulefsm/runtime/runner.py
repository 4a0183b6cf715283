"""
Runtime - The Demo Shell
========================

Entrypoint that builds a machine from configuration and walks it through a
sequence of transition attempts, printing each outcome.

Run:
    python -m rulefsm.runtime.runner
    python -m rulefsm.runtime.runner --config workflow.yaml --trace
"""

import argparse
import json
from dataclasses import dataclass
from typing import Hashable, List, Optional

from ..machine import StateMachine, MachineResult
from ..evaluation import TransitionTracer
from .config import load_config, build_machine, StepConfig


# ============================================================================
# Runtime Configuration
# ============================================================================

@dataclass
class RuntimeConfig:
    """Runtime configuration (how to run, not what the machine is)."""
    config_path: Optional[str] = None
    verbose: bool = True
    trace: bool = False


@dataclass
class StepOutcome:
    """Result of one walkthrough step."""
    step: StepConfig
    result: MachineResult
    state: Hashable  # Machine state after the step


# ============================================================================
# Walkthrough
# ============================================================================

def _describe(result: MachineResult) -> str:
    return "ok" if result.ok else f"{result.error.name}: {result.reason}"


def run_walkthrough(
    machine: StateMachine,
    steps: List[StepConfig],
    verbose: bool = True,
) -> List[StepOutcome]:
    """Attempt each step in order and collect the outcomes."""
    outcomes: List[StepOutcome] = []

    if verbose:
        print(f"[state] {machine.state}")

    for step in steps:
        result = machine.transition(step.to, *step.args)
        outcomes.append(StepOutcome(step=step, result=result, state=machine.state))

        if verbose:
            args = ", ".join(repr(a) for a in step.args)
            print(f"[transition] {step.to}({args}) -> {_describe(result)}")
            print(f"[state] {machine.state}")

    return outcomes


def run(config: RuntimeConfig) -> List[StepOutcome]:
    """Load configuration, build the machine, run the walkthrough."""
    system_config = load_config(config.config_path)
    tracer = TransitionTracer() if config.trace else None

    machine = build_machine(system_config, tracer=tracer)
    if config.verbose:
        print(f"[Runtime] Machine ready: {len(machine.states)} states, {len(machine.rules)} rules")
        for rule in machine.rules:
            print(f"[add rule] {rule!r}")
        print()

    outcomes = run_walkthrough(machine, system_config.walkthrough, verbose=config.verbose)

    if config.verbose:
        passed = sum(1 for o in outcomes if o.result.ok)
        print("\n" + "=" * 50)
        print("SUMMARY")
        print("=" * 50)
        print(f"Final state: {machine.state}")
        print(f"Transitions: {passed} ok, {len(outcomes) - passed} denied")
        print("=" * 50)

    if tracer is not None:
        print(json.dumps(tracer.to_dict(), indent=2))

    return outcomes


# ============================================================================
# CLI Entrypoint
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Rule-gated state machine demo")
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--quiet", action="store_true", help="Only print the trace, if any")
    parser.add_argument("--trace", action="store_true", help="Dump the transition trace as JSON")
    args = parser.parse_args(argv)

    run(RuntimeConfig(
        config_path=args.config,
        verbose=not args.quiet,
        trace=args.trace,
    ))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
