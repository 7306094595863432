"""Training number (NTN/DRN) generation for trainee programme memberships."""

__version__ = "1.0.0"
