"""
vitae - resume data to print-ready PDF

Builds the PDF resume for a personal website from a JSON Resume data file.

Architecture:
- Intake Context: Loads the structured profile record
- Templating Context: Renders the record to a styled HTML document
- Rendering Context: Exports the HTML document to PDF with headless Chromium
"""

__version__ = "0.1.0"
