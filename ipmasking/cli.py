#!/usr/bin/env python3
import sys
import logging

from ipmasking.argparsetree import ArgParseTree
from ipmasking.console import Output, init_logging
from ipmasking.ip import IPv4Address, IPv4Subnet, calculate_mask, parse_prefix, validate_cidr, validate_ip
from ipmasking.session import Session
from ipmasking.settings import Settings

LOG = logging.getLogger(__name__)

FALLBACK_ERROR = 'An unexpected error occurred: {error}'


class Command(ArgParseTree):
    settings = None
    output = None
    error_exitcode = 2

    def run(self, args):
        init_logging(args.verbose)
        self.output = Output(args.color or 'auto')
        try:
            self.settings = Settings(args.config)
            if not args.color:
                self.output = Output(self.settings.color)
            return self.go(args)
        except Exception as e:
            LOG.debug('Unhandled error', exc_info=True)
            self.output.write(self._error_text(e), 'failure')
            return self.error_exitcode

    def go(self, args):
        raise NotImplementedError()

    def _error_text(self, error):
        if self.settings is not None:
            try:
                return self.settings.message('unexpected_error', error=error)
            except (KeyError, IndexError, ValueError):
                LOG.debug('Bad "unexpected_error" message in %s', self.settings.path)
        return FALLBACK_ERROR.format(error=error)


class Main(Command):
    """\
    Check IPv4 addresses against a subnet

    Without a sub command, prompts for a network in a.b.c.d/n form and then
    for addresses to check against it. An empty line exits.
    """
    error_exitcode = 0

    def args(self, parser):
        parser.add_argument('--config', default=None, metavar='PATH',
                            help='Settings file (default: ~/.config/ip-masking/settings.conf)')
        parser.add_argument('--color', default=None, choices=('auto', 'always', 'never'),
                            help='Terminal colours, overrides the settings file')
        parser.add_argument('-v', '--verbose', default=False, action='store_true',
                            help='Log debug output to stderr')

    def go(self, args):
        Session(self.settings, self.output).run()
        return 0


class Check(Command):
    """\
    Check addresses against a network

    Print whether each address is in the network. Exits 0 when all of them
    are, 1 when any is not and 2 on malformed input.
    """
    def args(self, parser):
        parser.add_argument('network', help='IPv4 network, e.g.: 192.168.15.0/24')
        parser.add_argument('address', nargs='+', help='IPv4 address to check, e.g.: 192.168.15.10')

    def go(self, args):
        if not validate_cidr(args.network):
            self.output.write('%s: %s' % (args.network, self.settings.message('network_invalid')), 'error')
            return 2

        subnet = IPv4Subnet(args.network)
        session = Session(self.settings, self.output)
        exitcode = 0
        for address in args.address:
            if not validate_ip(address):
                self.output.write('%s: %s' % (address, self.settings.message('address_invalid')), 'error')
                exitcode = 2
            elif not session.report(address, subnet):
                exitcode = max(exitcode, 1)
        return exitcode


class Mask(Command):
    """\
    Print the subnet mask for a prefix length
    """
    def args(self, parser):
        parser.add_argument('prefix', help='Prefix length 0-32, e.g.: 24 or /24')

    def go(self, args):
        try:
            prefix_len = parse_prefix(args.prefix)
        except ValueError as e:
            self.output.write(str(e), 'error')
            return 2
        self.output.write(str(IPv4Address(calculate_mask(prefix_len))))
        return 0


def main(argv=None):
    m = Main()
    Check(m)
    Mask(m)

    try:
        return m.main(argv)
    except KeyboardInterrupt:
        sys.stderr.write('^C\n')
        return 0


if __name__ == "__main__":
    sys.exit(main())
