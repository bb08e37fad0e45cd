"""
IPv4 address and subnet arithmetic.

    >>> subnet = IPv4Subnet('192.168.15.0/24')
    >>> str(subnet.mask)
    '255.255.255.0'
    >>> '192.168.15.10' in subnet
    True
    >>> '192.168.16.10' in subnet
    False
"""
import re
from functools import reduce

_OCTET = r'(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)'
_PREFIX = r'([0-9]|[12][0-9]|3[0-2])'

IP_PATTERN = re.compile(r'(%s\.){3}%s' % (_OCTET, _OCTET))
CIDR_PATTERN = re.compile(r'(%s\.){3}%s/%s' % (_OCTET, _OCTET, _PREFIX))
PREFIX_PATTERN = re.compile(r'/?%s' % _PREFIX)


class IPv4Address(object):
    def __init__(self, addr):
        if isinstance(addr, IPv4Address):
            self._raw = addr._raw
        elif isinstance(addr, str):
            self._raw = ip_to_int(addr)
        elif isinstance(addr, bytes) and len(addr) == 4:
            self._raw = int.from_bytes(addr, 'big')
        elif isinstance(addr, int) and 0 <= addr <= 0xFFFFFFFF:
            self._raw = addr
        else:
            raise ValueError('Can\'t convert %s to IPv4Address' % repr(addr))

    @property
    def int(self):
        return self._raw

    @property
    def packed(self):
        return self._raw.to_bytes(4, 'big')

    def __str__(self):
        return int_to_ip(self._raw)

    def __repr__(self):
        return '<IPv4Address %s>' % int_to_ip(self._raw)

    def __eq__(self, other):
        if not isinstance(other, IPv4Address):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)


class IPv4Subnet(object):
    """
    A base address and prefix length, as given in ``a.b.c.d/n`` notation.

    The base address is kept as entered; ``network`` is the masked form.
    """
    def __init__(self, cidr):
        if isinstance(cidr, self.__class__):
            self._base = cidr._base
            self._size = cidr._size
            return
        base, size = split_cidr(cidr)
        self._base = IPv4Address(base)
        self._size = size

    @property
    def base(self):
        return self._base

    @property
    def prefix_len(self):
        return self._size

    @property
    def mask(self):
        return IPv4Address(calculate_mask(self._size))

    @property
    def network(self):
        return IPv4Address(self._base.int & self.mask.int)

    def __contains__(self, other):
        if isinstance(other, IPv4Address):
            other = str(other)
        return is_same_subnet(other, str(self._base), self._size)

    def __str__(self):
        return '%s/%s' % (self._base, self._size)

    def __repr__(self):
        return '<IPv4Subnet %s>' % self.__str__()


def validate_ip(text):
    """
    True if ``text`` is a dotted-quad IPv4 address with every octet in 0-255.

        >>> validate_ip('192.168.15.10')
        True
        >>> validate_ip('192.168.15.256')
        False
    """
    if not isinstance(text, str):
        return False
    return IP_PATTERN.fullmatch(text) is not None


def validate_cidr(text):
    """
    True if ``text`` is an IPv4 address followed by ``/`` and a prefix length
    in 0-32.

        >>> validate_cidr('192.168.15.0/24')
        True
        >>> validate_cidr('192.168.15.0/33')
        False
    """
    if not isinstance(text, str):
        return False
    return CIDR_PATTERN.fullmatch(text) is not None


def split_cidr(text):
    """
    Split CIDR notation into its base address and prefix length.

        >>> split_cidr('192.168.15.0/24')
        ('192.168.15.0', 24)
    """
    if not validate_cidr(text):
        raise ValueError('Invalid CIDR "%s"' % text)
    base, size = text.split('/', 1)
    return base, int(size)


def parse_prefix(text):
    if not isinstance(text, str) or PREFIX_PATTERN.fullmatch(text) is None:
        raise ValueError('Invalid prefix length "%s"' % text)
    return int(text.lstrip('/'))


def calculate_mask(prefix_len):
    """
    Build the 4 byte subnet mask for a prefix length.

        >>> list(calculate_mask(20))
        [255, 255, 240, 0]
    """
    if isinstance(prefix_len, bool) or not isinstance(prefix_len, int):
        raise ValueError('Prefix length must be an int, not %s' % repr(prefix_len))
    if not 0 <= prefix_len <= 32:
        raise ValueError('Prefix length %d out of range 0-32' % prefix_len)

    full, partial = divmod(prefix_len, 8)
    mask = [0xFF] * full + [0x00] * (4 - full)
    if partial:
        mask[full] = (0xFF << (8 - partial)) & 0xFF
    return bytes(mask)


def is_same_subnet(ip, base_ip, prefix_len):
    """
    True if ``ip`` and ``base_ip`` share the first ``prefix_len`` bits.

    Malformed input gives False rather than an exception.
    """
    try:
        ip_bytes = ip_to_bytes(ip)
        base_bytes = ip_to_bytes(base_ip)
        mask = calculate_mask(prefix_len)
    except ValueError:
        return False

    for addr, base, m in zip(ip_bytes, base_bytes, mask):
        if addr & m != base & m:
            return False
    return True


def ip_to_bytes(addr):
    if not validate_ip(addr):
        raise ValueError('Invalid IPv4 address "%s"' % addr)
    return bytes(int(x) for x in addr.split('.'))


def ip_to_int(addr):
    return reduce(lambda x, y: x * 0x100 + y, ip_to_bytes(addr), 0)


def int_to_ip(raw):
    addr = []
    for _ in range(4):
        addr.append(str(raw % 0x100))
        raw //= 0x100

    if raw != 0:
        raise ValueError('Value too large for an IPv4 address')
    return '.'.join(reversed(addr))
