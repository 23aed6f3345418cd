import pytest

import nccheck
from nccheck import compliance


NTP_PASS = 'NTP is enabled'
NTP_FAIL = 'NTP is not configured'
TELNET_PASS = 'Telnet is disabled'
TELNET_FAIL = 'Telnet is enabled - SECURITY VIOLATION'
HOSTNAME_PASS = 'Hostname follows naming convention'
HOSTNAME_FAIL = 'Hostname does not follow naming convention'


def test_all_rules_pass():

    result = nccheck.evaluate('ntp server 1.1.1.1\nno telnet\nhostname router1')

    assert result.passed == ('NTP', 'Telnet', 'Hostname')
    assert result.failed == ()
    assert result.failed_messages == ()
    assert result.success == True


def test_telnet_enabled():

    result = nccheck.evaluate('telnet enabled\nhostname x')

    assert result.passed == ('Hostname',)
    assert result.failed == ('NTP', 'Telnet')
    assert result.failed_messages == (NTP_FAIL, TELNET_FAIL)
    assert result.success == False


def test_empty_configuration():

    result = nccheck.evaluate('')

    # An empty configuration mentions no telnet at all, so telnet passes;
    # the other two rules have nothing to match.

    assert result.failed == ('NTP', 'Hostname')
    assert result.passed == ('Telnet',)
    assert result.success == False


def test_ntp_rule():

    rule = compliance.CATALOG[0]

    for text in ('NTP server 10.0.0.1', 'clock timezone UTC', 'Clock', 'xxntpxx'):
        assert rule.check(text) == True

    for text in ('', 'hostname router', 'n t p', 'time server'):
        assert rule.check(text) == False


def test_telnet_rule():

    rule = compliance.CATALOG[1]

    assert rule.check('TELNET enabled') == False
    assert rule.check('transport input telnet ssh') == False
    assert rule.check('No Telnet') == True
    assert rule.check('telnet\nno telnet') == True
    assert rule.check('ssh only') == True
    assert rule.check('') == True


def test_hostname_rule():

    rule = compliance.CATALOG[2]

    assert rule.check('HOSTNAME core1') == True
    assert rule.check('<rpc-reply xmlns="urn:ietf:params:xml:ns:netconf:base:1.0"/>') == True
    assert rule.check('interface eth0') == False


def test_one_outcome_per_rule():

    texts = (
        '',
        'ntp',
        'telnet',
        'no telnet clock hostname',
        'TELNET NTP NETCONF',
        '\x00\xff unicode ✓',
    )

    for text in texts:
        result = nccheck.evaluate(text)
        assert result.total == len(compliance.CATALOG)
        assert len(result.passed) + len(result.failed) == 3


def test_deterministic():

    text = 'telnet enabled\nclock set'
    first = nccheck.evaluate(text)
    second = nccheck.evaluate(text)

    assert first == second
    assert first.passed == second.passed
    assert first.failed == second.failed


def test_result_is_immutable():

    result = nccheck.evaluate('ntp')

    with pytest.raises(AttributeError):
        result.outcomes = ()


def test_additional_rule():
    """ New rules are additions to the catalog, with no change to the
        evaluation loop.
    """

    ssh = nccheck.Rule('SSH', lambda text: 'ssh' in text, 'SSH is enabled', 'SSH is not enabled')
    rules = compliance.CATALOG + (ssh,)

    result = nccheck.evaluate('NTP\nSSH version 2\nhostname r1', rules)
    assert result.passed == ('NTP', 'Telnet', 'Hostname', 'SSH')
    assert result.total == 4

    result = nccheck.evaluate('ntp hostname', rules)
    assert result.failed == ('SSH',)
    assert result.failed_messages == ('SSH is not enabled',)


def test_report_success(reporter):

    result = nccheck.evaluate('ntp server 1.1.1.1\nno telnet\nhostname router1')
    compliance.report(result, reporter)

    assert reporter.of('fail') == []
    assert reporter.of('pass')[:3] == [NTP_PASS, TELNET_PASS, HOSTNAME_PASS]
    assert 'All 3 rules passed' in reporter.of('pass')


def test_report_failure(reporter):

    result = nccheck.evaluate('telnet enabled\nhostname x')
    compliance.report(result, reporter)

    # Rule lines are rendered in catalog order, whatever their outcome.

    rule_lines = [text for level, text in reporter.lines][:3]
    assert rule_lines == [NTP_FAIL, TELNET_FAIL, HOSTNAME_PASS]

    failures = reporter.of('fail')
    assert '1 rules passed, 2 rule(s) failed' in failures
    assert '  - ' + NTP_FAIL in failures
    assert '  - ' + TELNET_FAIL in failures


def test_outcomes():

    result = nccheck.evaluate('telnet enabled\nhostname x')

    assert result.outcomes == (
        nccheck.Outcome('NTP', False, NTP_FAIL),
        nccheck.Outcome('Telnet', False, TELNET_FAIL),
        nccheck.Outcome('Hostname', True, HOSTNAME_PASS),
    )


def test_report_uses_recorded_outcomes(reporter):
    """ A result renders from its own outcomes, whichever rules produced it.
        Two rules sharing a pass message still report each verdict.
    """

    first = nccheck.Rule('First', lambda text: True, 'Looks fine', 'First broken')
    second = nccheck.Rule('Second', lambda text: False, 'Looks fine', 'Second broken')

    result = nccheck.evaluate('anything', (first, second))
    compliance.report(result, reporter)

    rule_lines = reporter.lines[:2]
    assert rule_lines == [('pass', 'Looks fine'), ('fail', 'Second broken')]
    assert '1 rules passed, 1 rule(s) failed' in reporter.of('fail')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
