"""Maintain make (plan9) related files."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field

from minicore.options import CommandError, UsageError, run_command, split_args

USAGE = "usage: mk [-f mkfile] ... [ option ... ] [ target ... ]"
DESCRIPTION = "Maintain make (plan9) related files"


@dataclass
class Rule:
    targets: list[str]
    prerequisites: list[str]
    recipe: list[str] = field(default_factory=list)


@dataclass
class MkOptions:
    mkfile: str = "mkfile"
    assume_out_of_date: bool = False
    debug: bool = False
    explain: bool = False
    force_intermediate: bool = False
    keep_going: bool = False
    print_only: bool = False
    sequential: bool = False
    touch: bool = False


def parse_mkfile(content: str) -> dict[str, Rule]:
    """Return the rules of a mkfile keyed by each of their targets.

    A rule line is ``targets: prerequisites``; the tab-indented lines after it
    are its recipe. Blank lines and ``#`` comments are skipped; any other line
    without a colon ends the current rule.
    """
    rules: dict[str, Rule] = {}
    current: Rule | None = None

    def store(rule: Rule | None) -> None:
        if rule is not None:
            for target in rule.targets:
                rules[target] = rule

    for line in content.split("\n"):
        line = line.removesuffix("\r")
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        if not line.startswith("\t"):
            store(current)
            current = None
            head, colon, tail = trimmed.partition(":")
            if colon:
                current = Rule(head.split(), tail.split())
        elif current is not None:
            current.recipe.append(line[1:])

    store(current)
    return rules


def execute_recipe(rule: Rule, options: MkOptions) -> None:
    """Print the recipe, or run it with the shell named by ``MKSHELL``."""
    if options.print_only:
        for line in rule.recipe:
            print(line)
        return
    shell = os.environ.get("MKSHELL", "/bin/sh")
    completed = subprocess.run([shell, "-c", "\n".join(rule.recipe)], check=False)
    if completed.returncode != 0 and not options.keep_going:
        raise CommandError("Recipe execution failed")


def build_target(
    target: str, rules: dict[str, Rule], options: MkOptions, built: set[str]
) -> None:
    """Build ``target`` after its prerequisites, each at most once."""
    if target in built:
        return
    rule = rules.get(target)
    if rule is not None:
        for prerequisite in rule.prerequisites:
            build_target(prerequisite, rules, options, built)
        if options.explain:
            print(f"Building target: {target}")
        execute_recipe(rule, options)
        built.add(target)
    elif not os.path.exists(target):
        raise CommandError(f"No rule to make target '{target}'")


_FLAGS = {
    "a": "assume_out_of_date",
    "d": "debug",
    "e": "explain",
    "i": "force_intermediate",
    "k": "keep_going",
    "n": "print_only",
    "s": "sequential",
    "t": "touch",
}


def _run(args: list[str]) -> None:
    flags, targets = split_args(args, "f")
    options = MkOptions()
    for letter, value in flags:
        if letter == "f":
            options.mkfile = value or ""
        elif letter in _FLAGS:
            setattr(options, _FLAGS[letter], True)
        else:
            raise UsageError(f"invalid option -- '{letter}'")

    try:
        with open(options.mkfile, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError):
        raise CommandError(f"cannot read mkfile '{options.mkfile}'") from None

    rules = parse_mkfile(content)
    if not targets:
        first = next(iter(rules.values()), None)
        if first is None:
            raise CommandError("no targets")
        targets = [first.targets[0]]

    built: set[str] = set()
    for target in targets:
        build_target(target, rules, options, built)


def main(argv=None) -> int:
    """Run the mk command."""
    return run_command("mk", USAGE, _run, argv)