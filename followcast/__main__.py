import sys

from followcast.main import main

sys.exit(main())
