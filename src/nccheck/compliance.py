""" Compliance rules, and the evaluation of retrieved configuration text
    against them. Evaluation is pure: no I/O, no logging, no state
    carried between calls. Presentation goes through an injected reporter.

    The rule catalog is data. Adding a rule means adding a :class:`Rule`
    to :data:`CATALOG`; the evaluation loop in :func:`evaluate` never
    changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple


@dataclass(frozen=True)
class Rule:
    """ A named predicate over configuration text. The predicate receives
        the text already lower-cased, and returns True if the rule passes.
    """

    name: str
    predicate: Callable[[str], bool]
    pass_message: str
    fail_message: str

    def check(self, text: str) -> bool:
        return bool(self.predicate(text.lower()))


@dataclass(frozen=True)
class Outcome:
    """ The verdict of a single rule: its name, whether it passed, and the
        message describing the verdict.
    """

    rule: str
    passed: bool
    message: str


@dataclass(frozen=True)
class ComplianceResult:
    """ The ordered outcome of one evaluation, one :class:`Outcome` per rule
        in catalog order. :attr:`passed` and :attr:`failed` hold rule names.
    """

    outcomes: Tuple[Outcome, ...] = ()

    @property
    def passed(self) -> Tuple[str, ...]:
        return tuple(outcome.rule for outcome in self.outcomes if outcome.passed)

    @property
    def failed(self) -> Tuple[str, ...]:
        return tuple(outcome.rule for outcome in self.outcomes if not outcome.passed)

    @property
    def failed_messages(self) -> Tuple[str, ...]:
        return tuple(outcome.message for outcome in self.outcomes if not outcome.passed)

    @property
    def success(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def total(self) -> int:
        return len(self.outcomes)


def _ntp(text):
    return 'ntp' in text or 'clock' in text


def _telnet_disabled(text):
    return not ('telnet' in text and 'no telnet' not in text)


def _hostname(text):
    return 'hostname' in text or 'netconf' in text


CATALOG: Tuple[Rule, ...] = (
    Rule('NTP', _ntp,
         'NTP is enabled',
         'NTP is not configured'),
    Rule('Telnet', _telnet_disabled,
         'Telnet is disabled',
         'Telnet is enabled - SECURITY VIOLATION'),
    Rule('Hostname', _hostname,
         'Hostname follows naming convention',
         'Hostname does not follow naming convention'),
)


def evaluate(text: str, rules: Sequence[Rule] = CATALOG) -> ComplianceResult:
    """ Evaluate every rule in *rules* exactly once against *text*. """

    outcomes = list()

    for rule in rules:
        if rule.check(text):
            outcome = Outcome(rule.name, True, rule.pass_message)
        else:
            outcome = Outcome(rule.name, False, rule.fail_message)
        outcomes.append(outcome)

    return ComplianceResult(tuple(outcomes))


def report(result: ComplianceResult, reporter) -> None:
    """ Render *result* through *reporter*: one line per recorded outcome,
        in evaluation order, followed by a summary.
    """

    for outcome in result.outcomes:
        if outcome.passed:
            reporter.passed(outcome.message)
        else:
            reporter.failed(outcome.message)

    if result.success:
        reporter.passed('Compliance check successful!')
        reporter.passed('All %d rules passed' % (result.total))
        return

    reporter.failed('Compliance check failed!')
    reporter.failed('%d rules passed, %d rule(s) failed' % (len(result.passed), len(result.failed)))

    for message in result.failed_messages:
        reporter.failed('  - ' + message)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
