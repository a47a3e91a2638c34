import sys

from media_transcriber.main import main

sys.exit(main())
