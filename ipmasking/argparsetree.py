import sys
from argparse import ArgumentParser
from textwrap import dedent


class ArgParseTree(object):
    """
    Facilitates building a CLI argument parser with sub commands and options.

    A node with children still runs its own ``run()`` when no sub command is
    given, so the root can carry a default action.

    Example:
        $ script [--verbose] [mask <PREFIX>]

    >>> from ipmasking.argparsetree import ArgParseTree
    ...
    >>> class Main(ArgParseTree):
    ...     def args(self, parser):
    ...         parser.add_argument("--verbose", default=False, action='store_true')
    ...
    ...     def run(self, args):
    ...         print("MAIN: (%s)" % args.verbose)
    ...         return 0
    ...
    >>> class Mask(ArgParseTree):
    ...     '''\\
    ...     Print a subnet mask
    ...     '''
    ...     def args(self, parser):
    ...         parser.add_argument("prefix")
    ...
    ...     def run(self, args):
    ...         print("MASK: /%s (%s)" % (args.prefix, args.verbose))
    ...         return 3
    ...
    >>> m = Main()
    >>> Mask(m)  # doctest: +ELLIPSIS
    <...>
    >>> m.main([])
    MAIN: (False)
    0
    >>> m.main(['--verbose', 'mask', '24'])
    MASK: /24 (True)
    3
    """
    usage = None
    name = None
    _parent = None
    _children = None
    _parser = None
    _subparser = None

    def __init__(self, parent=None):
        if parent:
            self._parent = parent
            parent._children = parent._children or []
            parent._children.append(self)

    def _setup_args(self):
        if self._parent is None:
            self._parser = ArgumentParser(usage=self.usage, description=self._doc()[1])
        else:
            name = self.name or self.__class__.__name__.lower()
            help, description = self._doc()
            self._parser = self._parent._subparser.add_parser(name=name,
                                                              help=help,
                                                              description=description)

        try:
            self.args(self._parser)
        except AttributeError:
            pass

        if self._children:
            self._subparser = self._parser.add_subparsers()
            for child in self._children:
                child._setup_args()
        else:
            try:
                self._parser.set_defaults(_run=self.run)
            except AttributeError:
                pass

    def _doc(self):
        if not self.__doc__:
            return None, None
        doc = dedent(self.__doc__.rstrip()).strip('\n').splitlines()
        return doc[0], '\n'.join(doc[2:]) or None

    def main(self, argv=None):
        self._setup_args()

        if argv is None:
            argv = sys.argv[1:]

        args = self._parser.parse_args(argv)
        if '_run' in args:
            return args._run(args)
        run = getattr(self, 'run', None)
        if run is not None:
            return run(args)
        self._parser.print_help()
