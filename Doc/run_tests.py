#!/usr/bin/env python
"""
Run every app's Django test suite in one go
Usage: python Doc/run_tests.py [app label ...]
"""
import os
import sys
from pathlib import Path

import django
from django.conf import settings
from django.test.utils import get_runner

APPS = [
    'stationery.core',
    'stationery.catalog',
    'stationery.orders',
    'stationery.inventory',
    'stationery.reports',
]

if __name__ == "__main__":
    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'stationery.config.settings')
    django.setup()
    TestRunner = get_runner(settings)
    test_runner = TestRunner(verbosity=2)
    labels = [f'stationery.{label}' for label in sys.argv[1:]] or APPS
    failures = test_runner.run_tests(labels)
    sys.exit(bool(failures))
