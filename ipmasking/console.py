import sys
import logging

from rich.console import Console
from rich.logging import RichHandler


class Output(object):
    """
    Console output with one colour per kind of message.

    Colour is cosmetic: with ``color='never'``, or when ``auto`` finds no
    terminal, the same text is written without escape codes.
    """
    STYLES = {
        'error': 'yellow',
        'info': 'cyan',
        'success': 'green',
        'failure': 'red',
    }

    def __init__(self, color='auto', file=None, stdin=None):
        kwargs = {}
        if color == 'always':
            kwargs['force_terminal'] = True
            kwargs['color_system'] = 'standard'
        elif color == 'never':
            kwargs['color_system'] = None
        elif color != 'auto':
            raise ValueError('Unknown color mode "%s"' % color)

        self.__console = Console(file=file, markup=False, emoji=False, highlight=False,
                                 soft_wrap=True, **kwargs)
        self.__stdin = stdin

    @property
    def stdin(self):
        return self.__stdin or sys.stdin

    def write(self, text='', role=None):
        self.__console.print(text, style=self.STYLES.get(role))

    def prompt(self, text):
        self.__console.print(text, end=' ')
        line = self.stdin.readline()
        if not line:
            # EOF, leave the cursor on a fresh line
            self.__console.print()
            return ''
        return line.rstrip('\r\n')


def init_logging(verbose=False):
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(name)s: %(message)s', handlers=[handler])
