################################################################################
# File Name: __main__.py
# Purpose/Description: Module entry point for python -m bato
# Author: bato developers
# Creation Date: 2026-10-12
# Copyright: (c) 2026 bato Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author         | Description
# ================================================================================
# 2026-10-12    | bato developers | Initial implementation
# ================================================================================
################################################################################

"""Allow running bato with python -m bato."""

import sys

from .main import main

sys.exit(main())
