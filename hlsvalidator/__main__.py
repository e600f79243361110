import sys

from hlsvalidator.cli import main

sys.exit(main())
