import sys

from traefik_discovery.main import main

sys.exit(main())
