import sys

from clojette.repl import main

sys.exit(main())
