import sys

from ipv4calc.cli.main import main

sys.exit(main())
