import sys

from chord_symbol.cli import main

sys.exit(main())
