import sys

from guess_game.app import main

sys.exit(main())
