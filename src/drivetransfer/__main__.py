import sys

from drivetransfer.cli import main

sys.exit(main())
