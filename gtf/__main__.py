import sys

from gtf.cli import main

sys.exit(main())
