import sys

from calcengine.cli import main

sys.exit(main())
