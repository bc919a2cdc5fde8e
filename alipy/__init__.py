"""alipy - value objects and calibration-harness helpers for detector offline analysis.

Subpackages:
 * :py:mod:`alipy.pmd`     - calorimeter cell records
 * :py:mod:`alipy.steer`   - alignment objects, track points, trigger scalers
 * :py:mod:`alipy.shuttle` - calibration preprocessor test harness
"""

__version__ = '0.1.0'
