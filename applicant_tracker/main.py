"""
Applicant Tracker - Main Application

FastAPI backend with:
- Applicant CRUD and per-applicant comment threads
- Two interchangeable record stores (STORAGE_BACKEND=file | mongo)
- Resume PDF upload (file backend), served back from /applications

Run: uvicorn applicant_tracker.main:app --reload
"""

from applicant_tracker.api.app import create_app

app = create_app()
