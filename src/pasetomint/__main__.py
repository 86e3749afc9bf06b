import sys

from pasetomint.cli import main

sys.exit(main())
