import sys

from sqlbench.cli import main

sys.exit(main())
