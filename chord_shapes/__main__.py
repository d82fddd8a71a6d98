import sys

from chord_shapes.cli import main

sys.exit(main())
