# -*- coding: utf-8 -*-
"""
Configuration for pytest to run with default display preferences.
"""
import os

def pytest_ignore_collect(collection_path):
    if 'setup' in str(collection_path):
        return True

def pytest_configure(config):
    os.environ["DISABLE_PREFERENCES"] = "1"
    os.environ["PY_IGNORE_IMPORTMISMATCH"] = "1"
