"""
TechMatch - skill-based candidate matching for job postings.
"""

__app_name__ = "TechMatch"
__version__ = "0.1.0"
