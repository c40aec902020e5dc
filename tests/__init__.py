################################################################################
# File Name: __init__.py
# Purpose/Description: Test package initialization
# Author: bato developers
# Creation Date: 2026-10-12
# Copyright: (c) 2026 bato Project. All rights reserved.
################################################################################

"""
Test package for bato.

Run tests with:
    pytest tests/
    pytest tests/ --cov=src/bato --cov-report=html
"""
