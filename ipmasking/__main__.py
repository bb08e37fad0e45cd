import sys

from ipmasking.cli import main

sys.exit(main())
