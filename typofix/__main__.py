# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .cli import main

if __name__ == "__main__":
    main()
