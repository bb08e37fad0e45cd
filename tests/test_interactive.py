import os
import sys
import signal

import pexpect
import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _default_sigint():
    signal.signal(signal.SIGINT, signal.SIG_DFL)


@pytest.fixture
def spawn(home):
    children = []
    env = dict(os.environ, HOME=str(home), PYTHONPATH=ROOT)

    def spawn(*args):
        child = pexpect.spawn(sys.executable, ['-m', 'ipmasking', '--color', 'never'] + list(args),
                              env=env, cwd=ROOT, encoding='utf-8', timeout=20,
                              preexec_fn=_default_sigint)
        children.append(child)
        return child

    yield spawn

    for child in children:
        child.close(force=True)


def finish(child):
    child.expect(pexpect.EOF)
    child.close()
    return child.exitstatus


def test_session(spawn):
    child = spawn()
    child.expect_exact('Welcome to the IP address and subnet validator!')
    child.expect_exact('Enter a network (e.g. 192.168.15.0/24) or empty input to exit:')
    child.sendline('192.168.15.0/33')
    child.expect_exact('Invalid format! Use the format: xxx.xxx.xxx.xxx/xx')
    child.expect_exact('Enter a network')
    child.sendline('192.168.15.0/24')
    child.expect_exact('Enter IP addresses to check or empty input to exit.')

    child.expect_exact('Enter IP address:')
    child.sendline('192.168.15.10')
    child.expect_exact('IP address 192.168.15.10 IS in the same subnet.')

    child.expect_exact('Enter IP address:')
    child.sendline('192.168.16.10')
    child.expect_exact('IP address 192.168.16.10 IS NOT in the same subnet.')

    child.expect_exact('Enter IP address:')
    child.sendline('300.1.1.1')
    child.expect_exact('Invalid IP address. Try again.')

    child.expect_exact('Enter IP address:')
    child.sendline('')
    child.expect_exact('Exiting...')
    assert finish(child) == 0


def test_empty_network_exits(spawn):
    child = spawn()
    child.expect_exact('Enter a network')
    child.sendline('')
    child.expect(pexpect.EOF)
    assert 'Exiting...' in child.before
    assert 'Enter IP address' not in child.before
    child.close()
    assert child.exitstatus == 0


def test_end_of_input_exits(spawn):
    child = spawn()
    child.expect_exact('Enter a network')
    child.sendeof()
    child.expect_exact('Exiting...')
    assert finish(child) == 0


def test_interrupt_exits_zero(spawn):
    child = spawn()
    child.expect_exact('Enter a network')
    child.sendline('10.0.0.0/8')
    child.expect_exact('Enter IP address:')
    child.sendintr()
    child.expect_exact('^C')
    assert finish(child) == 0


def test_check_command(spawn):
    child = spawn('check', '10.0.0.0/8', '10.1.2.3', '11.1.2.3')
    child.expect_exact('IP address 10.1.2.3 IS in the same subnet.')
    child.expect_exact('IP address 11.1.2.3 IS NOT in the same subnet.')
    assert finish(child) == 1
