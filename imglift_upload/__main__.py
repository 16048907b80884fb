"""IMGLIFT Upload Module Entry Point"""

import sys

from imglift_upload.main import main

if __name__ == "__main__":
    sys.exit(main())
