"""
AWS Lambda handler — Mangum wrapper for the Code Auditor API.
"""

from mangum import Mangum

from code_auditor.main import app

handler = Mangum(app, lifespan="off")
