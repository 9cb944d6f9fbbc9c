import os

DEBUG = False
TESTING = True

CURRENCY = os.getenv("PAYROLL_CURRENCY", "Php")
