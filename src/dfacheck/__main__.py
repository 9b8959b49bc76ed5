import sys

from dfacheck.cli import main

sys.exit(main())
