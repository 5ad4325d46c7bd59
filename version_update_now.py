"""Update exactnum/version.py, a docstring-only module with a timestamped version-code."""

import datetime

VERSION_BASE = '0.1.0'
VERSION_PY = 'exactnum/version.py'
yyyy_mmdd_hhmm_ss = datetime.datetime.now(datetime.timezone.utc).strftime('%Y.%m%d.%H%M.%S')
# EXAMPLE:  UTC timestamp "2026.1019.1402.07"

with open(VERSION_PY, 'w') as version_py:
    version_py.write('"""')
    version_py.write(VERSION_BASE)
    version_py.write('.')
    version_py.write(yyyy_mmdd_hhmm_ss)
    version_py.write('"""')
    # EXAMPLE:  """0.1.0.2026.1019.1402.07"""
