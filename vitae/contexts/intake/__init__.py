"""
Intake Context

Responsibilities:
- Reads the resume data file (JSON Resume layout, JSON or YAML)
- Validates its shape and dates
- Builds the immutable ProfileRecord

Owns: Profile record data structures, data file parsing
Never: Produces markup or output files
"""

from vitae.contexts.intake.profile_data_structure import ProfileRecord
from vitae.contexts.intake.profile_loader import load_profile, parse_profile

__all__ = ["ProfileRecord", "load_profile", "parse_profile"]
