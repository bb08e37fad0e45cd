import logging

from ipmasking.ip import IPv4Subnet, validate_cidr, validate_ip

LOG = logging.getLogger(__name__)


class Session(object):
    """
    The interactive prompt loops: read one network, then check addresses
    against it until an empty line.
    """
    def __init__(self, settings, output):
        self.__settings = settings
        self.__output = output

    def run(self):
        subnet = self.acquire_network()
        if subnet is None:
            return False
        self.process_addresses(subnet)
        return True

    def acquire_network(self):
        self.__output.write(self._msg('welcome'))
        while True:
            text = self.__output.prompt(self._msg('network_prompt'))

            if not text:
                self.__output.write(self._msg('exiting'), 'info')
                return None

            if not validate_cidr(text):
                LOG.debug('Rejected network %r', text)
                self.__output.write(self._msg('network_invalid'), 'error')
                continue

            subnet = IPv4Subnet(text)
            LOG.debug('Network %s, mask %s', subnet, subnet.mask)
            return subnet

    def process_addresses(self, subnet):
        self.__output.write(self._msg('address_intro'))
        while True:
            self.__output.write()
            text = self.__output.prompt(self._msg('address_prompt'))

            if not text:
                self.__output.write(self._msg('exiting'), 'info')
                break

            if not validate_ip(text):
                LOG.debug('Rejected address %r', text)
                self.__output.write(self._msg('address_invalid'), 'error')
                continue

            self.report(text, subnet)

    def report(self, ip, subnet):
        member = ip in subnet
        LOG.debug('%s in %s: %s', ip, subnet, member)
        if member:
            self.__output.write(self._msg('member', ip=ip), 'success')
        else:
            self.__output.write(self._msg('not_member', ip=ip), 'failure')
        return member

    def _msg(self, name, **params):
        return self.__settings.message(name, **params)
