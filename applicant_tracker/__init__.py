"""
Applicant Tracker
A minimal applicant-tracking backend.

Architecture:
- FastAPI: HTTP layer (applicants, comments, resume upload)
- Record store: MongoDB collection or a flat JSON file, chosen by config
- Resume PDFs: stored on disk next to the JSON file backend
"""

__version__ = "1.0.0"
