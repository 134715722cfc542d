import sys

from puzzlegen.cli import main

sys.exit(main())
