import sys

from josa.cli import main

sys.exit(main())
