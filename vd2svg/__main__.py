import sys

from vd2svg.main import main

sys.exit(main())
