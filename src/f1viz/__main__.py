import sys

from f1viz.cli import main

sys.exit(main())
