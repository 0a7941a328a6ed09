import sys

from mola.repl import main

sys.exit(main())
