"""Study-abroad counsellor backend: university fit scoring and AI counselling."""

__version__ = "1.0.0"
