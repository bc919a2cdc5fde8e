import os
import sys
from setuptools import setup, find_packages

print('Begin: %s' % ' '.join(sys.argv))

# allows a version number to be passed to the setup
VERSION = '0.1.0'
version_env = os.environ.get('VERSION')
if version_env:
    VERSION = version_env

print('-- alipy.setup.py version           : %s' % VERSION)
print('-- alipy.setup.py include sys.prefix: %s' % sys.prefix)

PACKAGES = find_packages(include=['alipy', 'alipy.*'])
INSTALL_REQS = [
    'numpy',
]
EXTRAS_REQS = {
    'test': ['pytest'],
}
ENTRY_POINTS = {
    'console_scripts': [
        'voluid = alipy.app.voluid:do_main',
    ]
}

setup(
    name = 'alipy',
    version = VERSION,
    license = 'ALICE Offline',
    description = 'Detector alignment, trigger scalers and calibration shuttle helpers for offline analysis',
    python_requires = '>=3.7',
    install_requires = INSTALL_REQS,
    extras_require = EXTRAS_REQS,
    packages = PACKAGES,
    entry_points = ENTRY_POINTS,
)
