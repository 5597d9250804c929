import sys

from efmodel.cli import main

sys.exit(main())
