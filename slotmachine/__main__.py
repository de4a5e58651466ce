import sys

from slotmachine.cli import main

sys.exit(main())
