import sys

from cienv.cli import main

sys.exit(main())
