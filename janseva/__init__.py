"""
Jan Seva Scheme Finder

Helps citizens discover government schemes and scholarships by matching their
eligibility profile against the published catalog, explaining every rejection.
"""

__version__ = "1.0.0"
__author__ = "Jan Seva Team"
__description__ = "Government scheme and scholarship eligibility matching service"
