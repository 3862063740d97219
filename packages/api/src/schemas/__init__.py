# This project was developed with assistance from AI tools.
"""Request/response schemas for the applicant portal API."""
