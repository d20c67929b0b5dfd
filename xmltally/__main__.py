import sys

from xmltally.cli import main

sys.exit(main())
