import sys

from repertoire_tutor.cli.main import main

sys.exit(main())
