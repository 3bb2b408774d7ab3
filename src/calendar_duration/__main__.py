import sys

from calendar_duration.cli import main

sys.exit(main())
