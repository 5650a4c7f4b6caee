import sys

from src.recovery.cli import main

sys.exit(main())
